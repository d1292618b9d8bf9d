import stallsim
from stallsim import GROUP

# one new person per cycle: (group, usage)
requests = [(GROUP.A, 2), (GROUP.A, 1), (GROUP.B, 1), (GROUP.A, 3), (GROUP.B, 2),
            (GROUP.B, 1), (GROUP.A, 1), (GROUP.A, 2), (GROUP.B, 1), (GROUP.B, 3)]

def show(snap):
    print("cycle %d:" % snap.cycle)
    for a in snap.activity:
        print("  " + stallsim.format_activity(a))
    print("  stalls:" + ''.join(' %d' % u for u in snap.slot_uses))
    print("  queue:" + ''.join(' %s(%d,%d)' % (g, i, r) for i, g, r in snap.queue_contents))

dc = stallsim.DataCollector(wait_times='dataseries', occupancy='timeseries',
                            departs='timemarks')
driver = stallsim.CycleDriver(source=stallsim.RequestSource.replay(requests), collect=dc)
driver.observe(show)
driver.run(10)

snap = driver.snapshot()
print("final: cycle=%d occupants=%d group=%s queue=%d" %
      (snap.cycle, snap.occupant_count, snap.admitted_group, snap.queue_length))
dc.report(driver.cycle)
