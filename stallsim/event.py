# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on May 6, 2020
# Last Update: Time-stamp: <2020-05-14 08:51:30 liux>
###############################################################

"""Simulation events and the event list."""

import heapq, itertools

__all__ = ["_Event", "_ProcessEvent", "_EventList_"]

# no event is earlier than this
minus_infinite_time = float("-inf")

class _Event(object):
    """The base class for all simulation events."""

    def __init__(self, sim, time, name=None):
        self._sim = sim
        self.time = time
        self.name = name

    def __str__(self):
        return "%g: evt=%s" % \
            (self.time, self.name if self.name else id(self))

class _ProcessEvent(_Event):
    """The event for a process to resume execution."""

    def __init__(self, sim, time, proc, name):
        super().__init__(sim, time, name)
        self.proc = proc

    def __str__(self):
        return "%g: prc_evt=%s" % \
            (self.time, self.name if self.name else self.proc.func.__name__+'()')

class _EventList_(object):
    """An event list sorts events in timestamp order.

    The event list is a binary heap of events keyed by time. Events
    with the same timestamp come out in the order they have been
    inserted, which keeps a simulation run repeatable.

    """

    def __init__(self):
        self.pqueue = []
        self.last = minus_infinite_time
        self._seq = itertools.count()

    def __len__(self):
        return len(self.pqueue)

    def insert(self, evt):
        if self.last <= evt.time:
            heapq.heappush(self.pqueue, (evt.time, next(self._seq), evt))
        else:
            raise ValueError("EventList.insert(%s): past event (last=%g)" %
                             (evt, self.last))

    def get_min(self):
        if len(self.pqueue) > 0:
            return self.pqueue[0][0] # just return the time
        else:
            raise IndexError("EventList.get_min() from empty list")

    def delete_min(self):
        if len(self.pqueue) > 0:
            assert self.last <= self.pqueue[0][0]
            self.last = self.pqueue[0][0]
            return heapq.heappop(self.pqueue)[-1]
        else:
            raise IndexError("EventList.delete_min() from empty list")
