# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on May 4, 2020
# Last Update: Time-stamp: <2020-05-19 10:42:17 liux>
###############################################################

import math, re

__all__ = ["GROUP", "WelfordStats", "TimeMarks", "DataSeries", "TimeSeries", "DataCollector"]

class GROUP:
    """The two mutually exclusive groups of requestors."""
    A = 'A'
    B = 'B'

    @staticmethod
    def all():
        return (GROUP.A, GROUP.B)

    @staticmethod
    def other(g):
        """Return the opposite group."""
        return GROUP.B if g == GROUP.A else GROUP.A

class WelfordStats(object):
    """Welford's one-pass algorithm to get the mean and variance from a
    series of data."""

    def __init__(self):
        self._n = 0
        self._mean = 0.0
        self._varsum = 0.0
        self._max = float('-inf')
        self._min = float('inf')

    def __len__(self): return self._n

    def push(self, x):
        """Add data to the series."""
        self._n += 1
        if x > self._max: self._max = x
        if x < self._min: self._min = x
        d = x-self._mean
        self._varsum += d*d*(self._n-1)/self._n
        self._mean += d/self._n

    def min(self): return self._min
    def max(self): return self._max
    def mean(self): return self._mean
    def stdev(self): return math.sqrt(self._varsum/self._n)
    def var(self): return self._varsum/self._n

class _Collected(object):
    """Common part of the collectors: optional raw samples and running
    statistics over the pushed values."""

    def __init__(self, keep_data=False):
        self._data = [] if keep_data else None
        self._rs = WelfordStats()

    def __len__(self):
        """Return the number of collected samples."""
        return len(self._rs)

    def data(self):
        """Return all samples if keep_data has been set when the collector
        was created; otherwise, return None."""
        return self._data

    def mean(self):
        return self._rs.mean() if len(self._rs) > 0 else 0

    def stdev(self):
        return self._rs.stdev() if len(self._rs) > 1 else float('inf')

    def var(self):
        return self._rs.var() if len(self._rs) > 1 else float('inf')

    def min(self):
        return self._rs.min() if len(self._rs) > 0 else float('-inf')

    def max(self):
        return self._rs.max() if len(self._rs) > 0 else float('inf')

class TimeMarks(_Collected):
    """A series of (non-decreasing) cycle numbers at which something
    happened."""

    def _push(self, t):
        if len(self._rs) > 0 and t < self._last:
            raise ValueError("TimeMarks._push(%g) earlier than last entry (%g)" %
                             (t, self._last))
        if self._data is not None:
            self._data.append(t)
        self._rs.push(t)
        self._last = t

    def rate(self, t=None):
        """Return the number of marks per cycle up to the given cycle. If t
        is ignored, it's up to the last entry."""
        if len(self._rs) == 0:
            return 0
        if t is None: t = self._last
        elif t < self._last:
            raise ValueError("TimeMarks.rate(t=%g) earlier than last entry (%g)" %
                             (t, self._last))
        return len(self._rs)/t if t > 0 else float('inf')

class DataSeries(_Collected):
    """A series of numbers."""

    def _push(self, d):
        if self._data is not None:
            self._data.append(d)
        self._rs.push(d)

class TimeSeries(_Collected):
    """A series of (cycle, value) pairs; the value is assumed to hold until
    the next sample."""

    def __init__(self, keep_data=False):
        super().__init__(keep_data)
        self._area = 0

    def _push(self, d):
        t, v = d
        if len(self._rs) == 0:
            self._first_t = self._last_t = t
            self._last_v = v
        elif t < self._last_t:
            raise ValueError("TimeSeries._push(%r) earlier than last entry (%g)" %
                             (d, self._last_t))
        if self._data is not None:
            self._data.append(d)
        self._rs.push(v)
        self._area += (t-self._last_t)*self._last_v
        self._last_t = t
        self._last_v = v

    def avg_over_time(self, t=None):
        """Return the value averaged over the cycles from the first sample up
        to cycle t (exclusive). If t is ignored, the last sample counts
        for one full cycle."""
        if len(self._rs) == 0:
            return 0
        if t is None: t = self._last_t+1
        elif t < self._last_t:
            raise ValueError("TimeSeries.avg_over_time(t=%g) earlier than last entry (%g)" %
                             (t, self._last_t))
        span = t-self._first_t
        if span <= 0:
            return self._last_v
        return (self._area+(t-self._last_t)*self._last_v)/span

class DataCollector(object):
    """Statistics collection for the cycle driver."""

    _patterns = {
        re.compile(r'timemarks\s*(\(\s*(all)?\s*\))?$') : TimeMarks,
        re.compile(r'dataseries\s*(\(\s*(all)?\s*\))?$') : DataSeries,
        re.compile(r'timeseries\s*(\(\s*(all)?\s*\))?$') : TimeSeries
    }

    def __init__(self, **kwargs):
        """Initialize the data collector. kwargs maps each attribute to be
        collected to its kind: 'timemarks', 'dataseries', or
        'timeseries'; append '(all)' to the kind to keep the raw
        samples as well."""
        self._attrs = {}
        for k, v in kwargs.items():
            if hasattr(self, k):
                raise ValueError("DataCollector attribute %s already exists" % k)
            for pat, cls in DataCollector._patterns.items():
                m = pat.match(v.strip())
                if m is not None:
                    c = cls(bool(m.group(2)))
                    setattr(self, k, c)
                    self._attrs[k] = c
                    break
            else:
                raise ValueError("DataCollector() %r has unknown value (%r)" % (k, v))

    def attrs(self):
        """Return the map from collected attributes to their collectors."""
        return dict(self._attrs)

    def _sample(self, k, v):
        if k in self._attrs:
            self._attrs[k]._push(v)

    def report(self, t=None):
        """Print out the collected statistics. If t is provided, it's
        expected to be the last cycle; otherwise, the statistics are
        up to the last sample."""

        for k, v in self._attrs.items():
            if isinstance(v, TimeMarks):
                print("%s (timemarks): samples=%d" % (k, len(v)))
                if len(v) > 0:
                    d = v.data()
                    if d is not None:
                        print("  data=%r ..." % d[:3])
                    print('  rate = %g' % v.rate(t))
            elif isinstance(v, DataSeries):
                print("%s (dataseries): samples=%d" % (k, len(v)))
                if len(v) > 0:
                    d = v.data()
                    if d is not None:
                        print("  data=%r ..." % d[:3])
                    print('  mean = %g' % v.mean())
                    if len(v) > 1:
                        print('  stdev = %g' % v.stdev())
                        print('  var = %g' % v.var())
                    print('  min = %g' % v.min())
                    print('  max = %g' % v.max())
            else:
                print("%s (timeseries): samples=%d" % (k, len(v)))
                if len(v) > 0:
                    d = v.data()
                    if d is not None:
                        print("  data=%r ..." % d[:3])
                    print('  mean = %g' % v.mean())
                    print('  min = %g' % v.min())
                    print('  max = %g' % v.max())
                    print("  avg_over_time=%g" % v.avg_over_time())
