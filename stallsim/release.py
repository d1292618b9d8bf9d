# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on May 5, 2020
# Last Update: Time-stamp: <2020-05-12 22:40:19 liux>
###############################################################

from .snapshot import _activity

__all__ = ["ReleaseController"]

import logging
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

class ReleaseController(object):
    """Let people out, once per cycle, before anyone is admitted.

    Each occupant uses the stall once per cycle: the remaining uses of
    every occupant are decremented by one, and those who reach zero
    leave, freeing their stalls. Stalls are visited in ascending
    index order, so simultaneous departures are always reported in
    the same order.

    """

    def __init__(self, registry):
        self.registry = registry

    def run(self):
        """Return the list of 'exit' activities for this cycle."""
        done = []
        for slot, p in self.registry.occupants():
            assert p.remaining > 0
            p.remaining -= 1
            if p.remaining == 0:
                self.registry.release_one(slot)
                log.debug("%r leaves stall %d" % (p, slot))
                done.append(_activity('exit', p, slot))
        return done
