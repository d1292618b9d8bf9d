import sys
import stallsim

# how fast can we go through the cycles?
ncycles = int(sys.argv[1]) if len(sys.argv) > 1 else 100000

driver = stallsim.CycleDriver('perf')
driver.run(ncycles)
snap = driver.snapshot()
print("cycle=%d occupants=%d queue=%d" % (snap.cycle, snap.occupant_count, snap.queue_length))
driver.show_runtime_report()
