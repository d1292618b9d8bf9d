# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on May 6, 2020
# Last Update: Time-stamp: <2020-05-19 10:15:02 liux>
###############################################################

import random, uuid, time
from collections import deque

from .event import _ProcessEvent, _EventList_
from .process import _Process

__all__ = ["simulator"]

import logging
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

# the namespace from which the random seed of a named simulator is derived
_NAMESPACE = uuid.UUID('6b1f3cd0-8e0a-4f7e-9d6c-2a51c7f3b0e4')

class simulator:
    """A simulator instance.

    A simulator maintains an event list and a simulation clock. It
    runs processes, which are separate threads of control that can
    sleep for some time while the simulation clock advances. In
    stallsim the simulator serves as the clock of the cycle driver:
    one unit of simulation time is one cycle.

    Each simulator can have an optional name. The name determines the
    seed of the pseudo-random generator attached to the simulator,
    unless a seed is given explicitly.

    """

    def __init__(self, name=None, seed=None):
        """Create a simulator.

        Args:
            name (string): a name of the simulator; if ignored, the
                system will generate one from the random module's
                default random sequence

            seed (int): the seed of the pseudo-random generator
                attached to the simulator; if ignored, the seed is
                derived from the name

        """

        if name is None:
            self.name = str(uuid.UUID(int=random.getrandbits(128)))
        else:
            self.name = name
        self._seed = seed
        log.info("creating simulator '%s'" % self.name)

        self.now = 0
        self._eventlist = _EventList_()
        self._theproc = None
        self._readyq = deque()
        self._rng = None

        # performance statistics
        self._runtime = {
            "start_clock": time.time(),
            "scheduled_events": 0,
            "executed_events": 0,
            "initiated_processes": 0,
            "process_contexts": 0,
            "terminated_processes": 0,
        }

    def _offset_time(self, caller, offset):
        # the time 'offset' units from now
        if offset < 0:
            errmsg = "simulator.%s(offset=%r) negative offset" % (caller, offset)
            log.error(errmsg)
            raise ValueError(errmsg)
        return self.now + offset

    def process(self, proc, name=None):
        """Create a process and schedule it to start running now.

        Args:
            proc (function): the starting function of the process,
                which takes no arguments

            name (string): an optional name for the process

        Returns:
            This method returns the process being created.

        """

        self._runtime["scheduled_events"] += 1
        self._runtime["initiated_processes"] += 1
        p = _Process(self, name, proc)
        e = _ProcessEvent(self, self.now, p, name)
        self._eventlist.insert(e)
        return p

    def cur_process(self):
        """Return the current running process, or None if we are not in a
        process context."""

        assert self._theproc is None or \
            self._theproc.state == _Process.STATE_RUNNING
        return self._theproc

    def sleep(self, offset):
        """A process blocks for the given time duration. This method must be
        called within a process context."""

        p = self.cur_process()
        if p is None:
            errmsg = "simulator.sleep() outside process context"
            log.error(errmsg)
            raise RuntimeError(errmsg)
        time = self._offset_time("sleep", offset)

        self._runtime["scheduled_events"] += 1
        p.sleep(time)

    def run(self, offset):
        """Run simulation and process events.

        This method processes the events in timestamp order and
        advances the simulation time accordingly. All events with
        timestamps smaller than 'offset' time units from now are
        processed, after which the simulation time is set to that
        time.

        """

        upper = self._offset_time("run", offset)

        # this is the main event loop of the simulator!
        while len(self._eventlist) > 0:
            t = self._eventlist.get_min()
            if t >= upper: break
            self._process_one_event()

        # the clock never winds back; no event can be scheduled before
        # the new time
        self._eventlist.last = upper
        self.now = upper

    def _process_one_event(self):
        """Process one event on the event list, assuming there is a least one
        event on the event list."""

        e = self._eventlist.delete_min()
        self.now = e.time
        self._runtime["executed_events"] += 1

        if isinstance(e, _ProcessEvent):
            e.proc.activate()
        else:
            errmsg = "unknown event type: " + str(e)
            log.error(errmsg)
            raise RuntimeError(errmsg)

        # processes are run only from the main loop!!
        while len(self._readyq) > 0:
            p = self._readyq.popleft()
            if p.state == _Process.STATE_RUNNING:
                self._theproc = p
                self._runtime["process_contexts"] += 1
                p.run()
        self._theproc = None

    def rng(self):
        """Return the pseudo-random number generator attached to this
        simulator. It's a random.Random instance (Mersenne twister)."""

        if self._rng is None:
            if self._seed is not None:
                self._rng = random.Random(self._seed)
            else:
                u = uuid.uuid3(_NAMESPACE, self.name)
                self._rng = random.Random(u.int % 2**32)
        return self._rng

    def show_runtime_report(self, prefix=''):
        """Print a report on the simulator's runtime performance.

        Args:
            prefix (str): all print-out lines will be prefixed by this
                string (the default is empty)

        """

        t = time.time()-self._runtime["start_clock"]
        print('%s*********** simulator performance metrics ***********' % prefix)
        print('%ssimulator name: %s' % (prefix, self.name))
        print('%ssimulation time: %g' % (prefix, self.now))
        print('%sexecution time: %g' % (prefix, t))
        print('%ssimulation to real time ratio: %g' % (prefix, self.now/t))
        print('%sscheduled events: %d (rate=%g)' %
              (prefix, self._runtime["scheduled_events"], self._runtime["scheduled_events"]/t))
        print('%sexecuted events: %d (rate=%g)' %
              (prefix, self._runtime["executed_events"], self._runtime["executed_events"]/t))
        print('%screated processes: %d' % (prefix, self._runtime["initiated_processes"]))
        print('%sfinished processes: %d' % (prefix, self._runtime["terminated_processes"]))
        print('%sprocess context switches: %d' % (prefix, self._runtime["process_contexts"]))
