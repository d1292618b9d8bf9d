import random
import stallsim

# statistics over a long run of an unnamed driver; the name (and the
# random draws) derive from the random module's default sequence
random.seed(13579)

dc = stallsim.DataCollector(arrivals='timemarks', admissions='timemarks',
                            departs='timemarks', wait_times='dataseries(all)',
                            occupancy='timeseries', queue_lengths='timeseries')
driver = stallsim.CycleDriver(collect=dc)
driver.run(1000)
dc.report(driver.cycle)
