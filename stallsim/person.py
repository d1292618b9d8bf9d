# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on May 4, 2020
# Last Update: Time-stamp: <2020-05-18 16:27:50 liux>
###############################################################

"""Requestors and where they come from."""

import itertools

from .utils import GROUP

__all__ = ["Person", "RequestSource", "MIN_USAGE", "MAX_USAGE"]

import logging
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

# range of the number of cycles a person holds a stall
MIN_USAGE = 1
MAX_USAGE = 3

def _check(group, usage):
    if group not in GROUP.all():
        errmsg = "Person(group=%r) unknown group" % group
        log.error(errmsg)
        raise ValueError(errmsg)
    if not isinstance(usage, int) or usage < MIN_USAGE or usage > MAX_USAGE:
        errmsg = "Person(usage=%r) out of range [%d, %d]" % (usage, MIN_USAGE, MAX_USAGE)
        log.error(errmsg)
        raise ValueError(errmsg)

class Person(object):
    """A requestor of the shared resource.

    A person has a unique id, belongs to one of the two groups, and
    needs to hold a stall for 'usage' cycles. The 'remaining' counter
    starts at 'usage' and is only decremented by the release
    controller while the person occupies a stall; the person leaves
    the system when it reaches zero. The id, the group, and the usage
    are read-only.

    """

    __slots__ = ('_id', '_group', '_usage', 'remaining')

    def __init__(self, id, group, usage):
        _check(group, usage)
        self._id = id
        self._group = group
        self._usage = usage
        self.remaining = usage

    @property
    def id(self):
        return self._id

    @property
    def group(self):
        return self._group

    @property
    def usage(self):
        return self._usage

    def __repr__(self):
        return "%s(%d,%d)" % (self.group, self.id, self.remaining)

class RequestSource(object):
    """Generator of new requestors, one per call to next().

    A request source combines a monotonic id counter (starting from
    one) with two draws for each new person: the group and the usage.
    Each draw is a function with no arguments. Use from_rng() to draw
    uniformly from a pseudo-random generator, or replay() to feed a
    fixed list of requests (mostly for testing).

    """

    def __init__(self, group_func, usage_func, first_id=1):
        self._ids = itertools.count(first_id)
        self._group_func = group_func
        self._usage_func = usage_func

    @classmethod
    def from_rng(cls, rng):
        """Uniform group from {A, B}, uniform usage from {1, 2, 3}; the group
        is drawn before the usage."""
        groups = GROUP.all()
        return cls(lambda: rng.choice(groups),
                   lambda: rng.randint(MIN_USAGE, MAX_USAGE))

    @classmethod
    def replay(cls, requests, first_id=1):
        """Replay a sequence of (group, usage) pairs; it is an error to ask
        for more persons than provided."""
        it = iter(requests)
        pending = []
        def group_func():
            try:
                g, u = next(it)
            except StopIteration:
                errmsg = "RequestSource.replay() ran out of requests"
                log.error(errmsg)
                raise RuntimeError(errmsg)
            pending.append(u)
            return g
        return cls(group_func, pending.pop, first_id)

    def next(self):
        """Create the next person. A bad draw raises ValueError without
        using up an id."""
        g = self._group_func()
        u = self._usage_func()
        _check(g, u)
        return Person(next(self._ids), g, u)
