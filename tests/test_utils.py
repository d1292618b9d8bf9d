import math
import pytest

from stallsim import GROUP, DataCollector, TimeMarks, DataSeries, TimeSeries

def test_groups():
    assert GROUP.all() == (GROUP.A, GROUP.B)
    assert GROUP.other(GROUP.A) == GROUP.B
    assert GROUP.other(GROUP.B) == GROUP.A

def test_dataseries():
    ds = DataSeries(True)
    assert ds.mean() == 0
    for x in (2, 4, 4, 4, 5, 5, 7, 9):
        ds._push(x)
    assert len(ds) == 8
    assert ds.mean() == pytest.approx(5)
    assert ds.var() == pytest.approx(4)
    assert ds.stdev() == pytest.approx(2)
    assert ds.min() == 2 and ds.max() == 9
    assert ds.data() == [2, 4, 4, 4, 5, 5, 7, 9]

def test_timemarks():
    tm = TimeMarks()
    assert tm.rate() == 0
    for t in (1, 1, 3, 4):
        tm._push(t)
    assert tm.data() is None
    assert tm.rate() == pytest.approx(1)
    assert tm.rate(8) == pytest.approx(0.5)
    with pytest.raises(ValueError):
        tm._push(2)
    with pytest.raises(ValueError):
        tm.rate(3)

def test_timeseries():
    ts = TimeSeries()
    for t, v in ((1, 1), (2, 3), (4, 0)):
        ts._push((t, v))
    # 1 for one cycle, 3 for two cycles, 0 for one cycle
    assert ts.avg_over_time() == pytest.approx(7/4)
    assert ts.avg_over_time(6) == pytest.approx(7/5)
    assert ts.mean() == pytest.approx(4/3)
    with pytest.raises(ValueError):
        ts._push((3, 1))

def test_datacollector():
    dc = DataCollector(a='timemarks', b='dataseries(all)', c='timeseries ( all )')
    assert isinstance(dc.a, TimeMarks) and dc.a.data() is None
    assert isinstance(dc.b, DataSeries) and dc.b.data() == []
    assert isinstance(dc.c, TimeSeries) and dc.c.data() == []
    assert sorted(dc.attrs()) == ['a', 'b', 'c']
    dc._sample('b', 1)
    dc._sample('nothing', 1)
    assert dc.b.data() == [1]
    with pytest.raises(ValueError):
        DataCollector(x='histogram')
    with pytest.raises(ValueError):
        DataCollector(report='timemarks')

def test_report(capsys):
    dc = DataCollector(waits='dataseries', marks='timemarks')
    dc._sample('waits', 1)
    dc._sample('waits', 3)
    dc._sample('marks', 2)
    dc.report(4)
    out = capsys.readouterr().out
    assert "waits (dataseries): samples=2" in out
    assert "  mean = 2" in out
    assert "marks (timemarks): samples=1" in out
    assert "  rate = 0.25" in out
