import pytest

from stallsim import GROUP, Person, WaitingQueue, EmptyQueueError

def test_fifo_order():
    q = WaitingQueue()
    ps = [Person(1, GROUP.A, 1), Person(2, GROUP.B, 2), Person(3, GROUP.A, 3)]
    for p in ps:
        q.enqueue(p)
    assert len(q) == 3
    assert list(q) == ps
    assert [q.dequeue() for _ in range(3)] == ps
    assert len(q) == 0

def test_counts_by_group():
    q = WaitingQueue()
    assert q.count_by_group(GROUP.A) == 0
    assert q.count_by_group(GROUP.B) == 0
    q.enqueue(Person(1, GROUP.A, 1))
    q.enqueue(Person(2, GROUP.B, 1))
    q.enqueue(Person(3, GROUP.A, 1))
    assert q.count_by_group(GROUP.A) == 2
    assert q.count_by_group(GROUP.B) == 1
    q.dequeue()
    assert q.count_by_group(GROUP.A) == 1
    assert q.count_by_group(GROUP.B) == 1

def test_peek_front_group():
    q = WaitingQueue()
    assert q.peek_front_group() is None
    q.enqueue(Person(1, GROUP.B, 1))
    q.enqueue(Person(2, GROUP.A, 1))
    assert q.peek_front_group() == GROUP.B
    # peeking has no side effect
    assert len(q) == 2
    q.dequeue()
    assert q.peek_front_group() == GROUP.A

def test_dequeue_empty():
    q = WaitingQueue()
    with pytest.raises(EmptyQueueError):
        q.dequeue()
    q.enqueue(Person(1, GROUP.A, 1))
    q.dequeue()
    # it's also an IndexError
    with pytest.raises(IndexError):
        q.dequeue()
