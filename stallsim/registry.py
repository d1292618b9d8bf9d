# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on May 4, 2020
# Last Update: Time-stamp: <2020-05-18 16:31:42 liux>
###############################################################

from .utils import GROUP
from .errors import CapacityExceededError, GroupConflictError

__all__ = ["OccupancyRegistry", "CAPACITY"]

import logging
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

# number of stalls at the shared resource
CAPACITY = 5

class OccupancyRegistry(object):
    """The stalls of the shared resource and who is in them.

    The registry keeps a fixed table of stalls (slots), each either
    empty or holding one person, the number of occupants of each
    group, and the admitted group. The registry enforces the two
    rules of the shared resource: there can be no more occupants than
    stalls, and all occupants must belong to the same group. The
    admitted group is None if and only if all stalls are empty; once
    the last occupant leaves, either group may be admitted again.

    """

    capacity = CAPACITY

    def __init__(self):
        self._slots = [None]*CAPACITY
        self._counts = dict((g, 0) for g in GROUP.all())
        self._nocc = 0
        self._group = None

    @property
    def admitted_group(self):
        """The group currently allowed in, or None if the stalls are empty."""
        return self._group

    def vacancy(self):
        """Return the number of empty stalls."""
        return CAPACITY-self._nocc

    def num_occupants(self):
        return self._nocc

    def count(self, g):
        """Return the number of occupants of the given group."""
        return self._counts[g]

    def occupants(self):
        """Return a list of (slot, person) pairs in ascending slot order."""
        return [(i, p) for i, p in enumerate(self._slots) if p is not None]

    def slot_uses(self):
        """Return the remaining uses in each stall (zero for an empty one)."""
        return [0 if p is None else p.remaining for p in self._slots]

    def admit(self, p):
        """Place the person in the first empty stall and return the stall's
        index. The person must belong to the admitted group, if there
        is one, and there must be a vacancy."""

        if self._nocc >= CAPACITY:
            errmsg = "OccupancyRegistry.admit(%r) no vacancy" % p
            log.error(errmsg)
            raise CapacityExceededError(errmsg)
        if self._group is not None and self._group != p.group:
            errmsg = "OccupancyRegistry.admit(%r) group %s is admitted" % (p, self._group)
            log.error(errmsg)
            raise GroupConflictError(errmsg)

        slot = self._slots.index(None)
        self._slots[slot] = p
        self._counts[p.group] += 1
        self._nocc += 1
        if self._group is None:
            self._group = p.group
        assert self._counts[GROUP.other(p.group)] == 0
        return slot

    def release_one(self, slot):
        """Free the given stall and return the person who was in it."""

        if not isinstance(slot, int) or slot < 0 or slot >= CAPACITY:
            errmsg = "OccupancyRegistry.release_one(slot=%r) out of range" % slot
            log.error(errmsg)
            raise ValueError(errmsg)
        p = self._slots[slot]
        if p is None:
            errmsg = "OccupancyRegistry.release_one(slot=%d) empty stall" % slot
            log.error(errmsg)
            raise ValueError(errmsg)

        self._slots[slot] = None
        self._counts[p.group] -= 1
        self._nocc -= 1
        if self._nocc == 0:
            # the last one out; the other group may come in
            self._group = None
        return p
