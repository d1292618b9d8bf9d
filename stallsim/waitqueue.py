# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on May 4, 2020
# Last Update: Time-stamp: <2020-05-12 21:14:08 liux>
###############################################################

from collections import deque

from .utils import GROUP
from .errors import EmptyQueueError

__all__ = ["WaitingQueue"]

import logging
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

class WaitingQueue(object):
    """The unbounded first-in-first-out line of persons waiting for a
    stall.

    The insertion order is the waiting priority; nobody is ever
    reordered or skipped. The number of waiting persons in each group
    is maintained as persons come and go, so that both len() and
    count_by_group() are constant time.

    """

    def __init__(self):
        self._q = deque()
        self._counts = dict((g, 0) for g in GROUP.all())

    def __len__(self):
        return len(self._q)

    def __iter__(self):
        """Iterate over the waiting persons, head first."""
        return iter(self._q)

    def enqueue(self, p):
        """Append the person at the tail of the queue."""
        self._q.append(p)
        self._counts[p.group] += 1

    def dequeue(self):
        """Remove and return the person at the head of the queue."""
        if len(self._q) == 0:
            errmsg = "WaitingQueue.dequeue() from empty queue"
            log.error(errmsg)
            raise EmptyQueueError(errmsg)
        p = self._q.popleft()
        self._counts[p.group] -= 1
        return p

    def peek_front_group(self):
        """Return the group of the person at the head, or None if no one is
        waiting."""
        if len(self._q) == 0:
            return None
        return self._q[0].group

    def count_by_group(self, g):
        """Return the number of waiting persons of the given group."""
        return self._counts[g]
