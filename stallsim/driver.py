# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on May 7, 2020
# Last Update: Time-stamp: <2020-05-19 10:30:55 liux>
###############################################################

from .utils import DataCollector, TimeMarks, DataSeries, TimeSeries
from .person import RequestSource
from .waitqueue import WaitingQueue
from .registry import OccupancyRegistry
from .admission import AdmissionController
from .release import ReleaseController
from .snapshot import take_snapshot
from .simulator import simulator

__all__ = ["CycleDriver"]

import logging
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

class CycleDriver(object):
    """The cycle driver runs the shared resource cycle by cycle.

    The driver owns all state of a run: the waiting queue, the
    occupancy registry, the two controllers, the request source, and
    the cycle count. Each cycle, the release controller runs first,
    then the admission controller; afterwards the driver publishes an
    immutable snapshot of the state, which is handed to all observers
    (e.g., the text reporter). Nothing is published in the middle of a
    cycle.

    If anything goes wrong in the middle of a cycle (e.g., an observer
    raises an exception, or a replayed source runs out of persons),
    the error is passed on to the caller of run(), and the driver
    refuses to run any more cycles; the cycle count and the last
    snapshot remain those of the last completed cycle.

    The cycles are carried out by a process on the driver's own
    simulator; one unit of simulation time is one cycle, with cycle k
    executed at time k-1. Calling run() repeatedly continues the same
    timeline.

    """

    def __init__(self, name=None, seed=None, source=None, collect=None):
        """Create a cycle driver.

        Args:
            name (string): an optional name, which is given to the
                simulator; a named driver without a seed draws the
                same random sequence each time it's created

            seed (int): an optional seed of the random draws of new
                persons (group and usage)

            source (RequestSource): an optional source of new persons;
                if provided, 'name' and 'seed' have no effect on the
                persons being drawn

            collect (DataCollector): the optional collector for
                statistics

        The DataCollector, if provided, accepts the following values:
            * **arrivals**: timemarks (cycles of person arrivals)
            * **admissions**: timemarks (cycles of persons entering a stall)
            * **departs**: timemarks (cycles of persons leaving a stall)
            * **wait_times**: dataseries (cycles each admitted person spent in the queue)
            * **occupancy**: timeseries (number of occupants at the end of each cycle)
            * **queue_lengths**: timeseries (queue length at the end of each cycle)

        """

        if collect is not None:
            if not isinstance(collect, DataCollector):
                errmsg = "CycleDriver(collect=%r) not a DataCollector" % collect
                log.error(errmsg)
                raise TypeError(errmsg)
            for k, v in collect.attrs().items():
                if k in ('arrivals', 'admissions', 'departs'):
                    kind = TimeMarks
                elif k == 'wait_times':
                    kind = DataSeries
                elif k in ('occupancy', 'queue_lengths'):
                    kind = TimeSeries
                else:
                    errmsg = "CycleDriver DataCollector: '%s' unrecognized" % k
                    log.error(errmsg)
                    raise ValueError(errmsg)
                if not isinstance(v, kind):
                    errmsg = "CycleDriver DataCollector: '%s' not %s" % (k, kind.__name__.lower())
                    log.error(errmsg)
                    raise TypeError(errmsg)
        self.stats = collect

        self._sim = simulator(name, seed=seed)
        if source is None:
            source = RequestSource.from_rng(self._sim.rng())
        self.source = source

        self.queue = WaitingQueue()
        self.registry = OccupancyRegistry()
        self.release = ReleaseController(self.registry)
        self.admission = AdmissionController(self.registry, self.queue, source)

        self.cycle = 0
        self._arrivals = {} # map from queued person's id to its arrival cycle
        self._observers = []
        self._published = None
        self._failure = None
        self._last = take_snapshot(0, self.registry, self.queue)

        self._sim.process(self._cycles, name='cycles')
        log.info("creating cycle driver '%s'" % self._sim.name)

    def observe(self, func):
        """Register a function to be called with each published snapshot."""
        self._observers.append(func)

    def snapshot(self):
        """Return the snapshot published at the end of the last cycle."""
        return self._last

    def run(self, ncycles):
        """Run the given number of cycles and return the list of snapshots
        published along the way."""

        if not isinstance(ncycles, int) or isinstance(ncycles, bool):
            errmsg = "CycleDriver.run(ncycles=%r) non-integer cycle count" % ncycles
            log.error(errmsg)
            raise TypeError(errmsg)
        if ncycles < 0:
            errmsg = "CycleDriver.run(ncycles=%r) negative cycle count" % ncycles
            log.error(errmsg)
            raise ValueError(errmsg)

        if self._failure is not None:
            errmsg = "CycleDriver.run() cycle process failed after cycle %d (%r)" % \
                     (self.cycle, self._failure)
            log.error(errmsg)
            raise RuntimeError(errmsg)

        self._published = []
        try:
            self._sim.run(offset=ncycles)
            return self._published
        except Exception as e:
            # the cycle process is gone with the exception
            self._failure = e
            raise
        finally:
            self._published = None

    def show_runtime_report(self, prefix=''):
        self._sim.show_runtime_report(prefix)

    def _cycles(self):
        # the one process that advances all state
        while True:
            self._step()
            self._sim.sleep(1)

    def _step(self):
        cycle = self.cycle+1
        exits = self.release.run()
        entries = self.admission.run()
        self._collect(cycle, exits, entries)

        snap = take_snapshot(cycle, self.registry, self.queue, exits+entries)
        self.cycle = cycle
        self._last = snap
        log.info("cycle %d: occupants=%d (group=%s), queue=%d" %
                 (self.cycle, snap.occupant_count, snap.admitted_group, snap.queue_length))
        if self._published is not None:
            self._published.append(snap)
        for func in self._observers:
            func(snap)

    def _collect(self, cycle, exits, entries):
        # queued persons are remembered until they move into a stall
        for a in entries:
            if a.kind == 'queue':
                self._arrivals[a.person_id] = cycle
            elif a.kind == 'move':
                # persons placed in the queue by hand count as just arrived
                a_cycle = self._arrivals.pop(a.person_id, cycle)

            if self.stats is not None:
                if a.kind != 'move':
                    self.stats._sample("arrivals", cycle)
                if a.kind == 'enter':
                    self.stats._sample("admissions", cycle)
                    self.stats._sample("wait_times", 0)
                elif a.kind == 'move':
                    self.stats._sample("admissions", cycle)
                    self.stats._sample("wait_times", cycle-a_cycle)

        if self.stats is not None:
            for a in exits:
                self.stats._sample("departs", cycle)
            self.stats._sample("occupancy", (cycle, self.registry.num_occupants()))
            self.stats._sample("queue_lengths", (cycle, len(self.queue)))
