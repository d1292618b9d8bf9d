import stallsim

# the same seed always gives the same run; a named driver without a
# seed does too
driver = stallsim.CycleDriver(seed=20200504)
for snap in driver.run(20):
    print("%3d: stalls=%s group=%s queue=%d (A=%d, B=%d)" %
          (snap.cycle, ''.join(str(u) for u in snap.slot_uses), snap.admitted_group,
           snap.queue_length, snap.queue_group_a_count, snap.queue_group_b_count))
