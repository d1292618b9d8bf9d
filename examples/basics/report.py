import stallsim
from stallsim import GROUP

# the console report of each cycle, as printed by the command line
requests = [(GROUP.A, 1), (GROUP.B, 2), (GROUP.A, 2)]
driver = stallsim.CycleDriver(source=stallsim.RequestSource.replay(requests))
driver.observe(stallsim.print_snapshot)
driver.run(3)
