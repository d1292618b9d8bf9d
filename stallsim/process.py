# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on May 6, 2020
# Last Update: Time-stamp: <2020-05-14 09:03:12 liux>
###############################################################

# greenlet must be installed as additional python package
from greenlet import greenlet

from .event import _ProcessEvent

__all__ = ["_Process"]

class _Process(object):
    """A process is an independent thread of execution."""

    # process runtime state
    STATE_STARTED       = 0
    STATE_RUNNING       = 1
    STATE_SUSPENDED     = 2
    STATE_TERMINATED    = 3

    def __init__(self, sim, name, func):
        """A process can only be created using simulator's process()
        function."""

        self._sim = sim
        self.name = name
        self.func = func
        self.state = _Process.STATE_STARTED
        self.main = None
        self.vert = greenlet(self.invoke)

    def activate(self):
        """Move the process into the ready queue."""
        if self.state != _Process.STATE_TERMINATED and \
           self.state != _Process.STATE_RUNNING:
            self.state = _Process.STATE_RUNNING
            self._sim._readyq.append(self)

    def invoke(self):
        """Invoke the start function of the process.

        Greenlet switches control to here. The start function can't
        simply return, since control must go back to the simulator's
        main loop, not to the parent greenlet; we therefore end by
        terminating the process explicitly.

        """
        self.func()
        self.terminate()

    def run(self):
        """Run this process when it's activated. This has to be called within
        the main loop of the simulator."""
        assert self.state == _Process.STATE_RUNNING
        self.main = greenlet.getcurrent()
        self.vert.switch()

    def sleep(self, until):
        """Schedule a future wakeup event and switch control to the
        simulator's main loop."""

        assert self.state == _Process.STATE_RUNNING
        assert self._sim._theproc == self
        assert self._sim.now <= until

        e = _ProcessEvent(self._sim, until, self, self.name)
        self._sim._eventlist.insert(e)
        self.state = _Process.STATE_SUSPENDED
        self.main.switch()

    def terminate(self):
        """Finish the process and switch back to the simulator's main loop."""
        if self.state != _Process.STATE_TERMINATED:
            assert self.state == _Process.STATE_RUNNING
            self.state = _Process.STATE_TERMINATED
            self._sim._runtime["terminated_processes"] += 1
        self.main.switch()
