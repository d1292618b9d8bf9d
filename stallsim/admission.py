# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on May 5, 2020
# Last Update: Time-stamp: <2020-05-18 17:10:46 liux>
###############################################################

from .snapshot import _activity

__all__ = ["AdmissionController"]

import logging
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

class AdmissionController(object):
    """Let people in, once per cycle, after the release controller has
    freed the stalls of those who are done.

    Admission happens in two phases. First, the queue is drained: the
    person at the head of the queue moves into a stall as long as
    there is a vacancy and the person belongs to the admitted group
    (or no group is admitted, i.e., the stalls are empty). Draining
    stops at the first person of the other group, even if people of
    the admitted group are waiting behind; the queue is never
    reordered. Second, exactly one new person arrives. The new person
    goes straight into a stall only if no one is waiting (including
    the case where the queue has just been drained empty), there is a
    vacancy, and the person's group is compatible with the admitted
    group; otherwise, the new person joins the tail of the queue.

    """

    def __init__(self, registry, queue, source):
        """The controller works on the given registry and queue, and draws
        new persons from the given request source."""
        self.registry = registry
        self.queue = queue
        self.source = source

    def _compatible(self, g):
        ag = self.registry.admitted_group
        return ag is None or ag == g

    def drain(self):
        """Move adjacent compatible persons from the head of the queue into
        the stalls. Return the list of 'move' activities."""

        done = []
        while len(self.queue) > 0 and self.registry.vacancy() > 0 and \
              self._compatible(self.queue.peek_front_group()):
            p = self.queue.dequeue()
            slot = self.registry.admit(p)
            log.debug("%r moves from queue to stall %d" % (p, slot))
            done.append(_activity('move', p, slot))
        return done

    def arrive(self, p):
        """Admit the newly arrived person directly or put it in the queue.
        Return an 'enter' or 'queue' activity accordingly."""

        if len(self.queue) == 0 and self.registry.vacancy() > 0 and \
           self._compatible(p.group):
            slot = self.registry.admit(p)
            log.debug("%r enters stall %d" % (p, slot))
            return _activity('enter', p, slot)
        else:
            self.queue.enqueue(p)
            log.debug("%r joins queue (length=%d)" % (p, len(self.queue)))
            return _activity('queue', p)

    def run(self):
        """Run both phases for one cycle and return all activities."""
        done = self.drain()
        done.append(self.arrive(self.source.next()))
        return done
