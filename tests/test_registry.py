import pytest

from stallsim import GROUP, Person, OccupancyRegistry, CAPACITY, \
    CapacityExceededError, GroupConflictError, StallError

def test_empty_registry():
    r = OccupancyRegistry()
    assert r.capacity == CAPACITY == 5
    assert r.vacancy() == 5
    assert r.num_occupants() == 0
    assert r.admitted_group is None
    assert r.occupants() == []
    assert r.slot_uses() == [0, 0, 0, 0, 0]

def test_admit_sets_group_and_fills_lowest_slot():
    r = OccupancyRegistry()
    assert r.admit(Person(1, GROUP.B, 2)) == 0
    assert r.admitted_group == GROUP.B
    assert r.admit(Person(2, GROUP.B, 3)) == 1
    assert r.count(GROUP.B) == 2
    assert r.count(GROUP.A) == 0
    assert r.vacancy() == 3
    assert r.slot_uses() == [2, 3, 0, 0, 0]

    # a freed slot in the middle is reused first
    r.admit(Person(3, GROUP.B, 1))
    r.release_one(1)
    assert r.admit(Person(4, GROUP.B, 1)) == 1
    assert [p.id for _, p in r.occupants()] == [1, 4, 3]

def test_capacity_exceeded():
    r = OccupancyRegistry()
    for i in range(5):
        r.admit(Person(i+1, GROUP.A, 1))
    assert r.vacancy() == 0
    with pytest.raises(CapacityExceededError):
        r.admit(Person(6, GROUP.A, 1))
    # no vacancy comes first, regardless of the group
    with pytest.raises(CapacityExceededError):
        r.admit(Person(7, GROUP.B, 1))
    assert r.num_occupants() == 5

def test_group_conflict():
    r = OccupancyRegistry()
    r.admit(Person(1, GROUP.A, 1))
    with pytest.raises(GroupConflictError):
        r.admit(Person(2, GROUP.B, 1))
    with pytest.raises(StallError):
        r.admit(Person(3, GROUP.B, 1))
    assert r.count(GROUP.B) == 0
    assert r.num_occupants() == 1

def test_release_resets_group_when_empty():
    r = OccupancyRegistry()
    r.admit(Person(1, GROUP.A, 1))
    r.admit(Person(2, GROUP.A, 1))
    p = r.release_one(0)
    assert p.id == 1
    assert r.admitted_group == GROUP.A
    r.release_one(1)
    assert r.admitted_group is None
    assert r.vacancy() == 5
    # the other group may come in now
    assert r.admit(Person(3, GROUP.B, 1)) == 0
    assert r.admitted_group == GROUP.B

def test_release_bad_slot():
    r = OccupancyRegistry()
    with pytest.raises(ValueError):
        r.release_one(0)
    with pytest.raises(ValueError):
        r.release_one(5)
    with pytest.raises(ValueError):
        r.release_one(-1)
