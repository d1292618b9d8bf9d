# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on May 8, 2020
# Last Update: Time-stamp: <2020-05-19 11:02:48 liux>
###############################################################

"""The interactive front end: ask for a number of cycles, run them,
print the report of each cycle, and repeat until zero is entered."""

import argparse, logging

from .utils import DataCollector
from .driver import CycleDriver
from .report import print_snapshot

__all__ = ["main"]

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())

PROMPT = "\nEnter the desired number of cycles or 0 to quit: "

def _parser():
    parser = argparse.ArgumentParser(prog="stallsim",
        description="Cycle-by-cycle simulation of shared stalls with two "
                    "mutually exclusive groups.")
    parser.add_argument("-s", "--seed", type=int, metavar='SEED', default=None,
                        help="set random seed")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable verbose information")
    parser.add_argument("-vv", "--debug", action="store_true",
                        help="enable debug information")
    parser.add_argument("--stats", action="store_true",
                        help="print statistics at exit")
    return parser

def _read_cycles(line):
    """Return the number of cycles entered, or None if it's not a
    non-negative integer."""
    try:
        n = int(line.strip())
    except ValueError:
        return None
    return n if n >= 0 else None

def main(argv=None):
    parser = _parser()
    args = parser.parse_args(argv)
    if args.seed is not None and (args.seed < 0 or args.seed >= 2**32):
        parser.error("argument --seed/-s must be a 32-bit integer")

    # turn logging info on if we are in verbose mode
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    elif args.verbose:
        logging.basicConfig(level=logging.INFO)

    collect = None
    if args.stats:
        collect = DataCollector(arrivals='timemarks', admissions='timemarks',
                                departs='timemarks', wait_times='dataseries',
                                occupancy='timeseries', queue_lengths='timeseries')
    driver = CycleDriver(seed=args.seed, collect=collect)
    driver.observe(print_snapshot)

    print("\nWelcome to the shared stalls!")
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            break
        n = _read_cycles(line)
        if n is None:
            log.info("rejected cycle count %r" % line)
            print("Please enter a non-negative integer (got %r)." % line.strip())
            continue
        if n == 0:
            break
        driver.run(n)
    print("\nThe stalls are now closed. Goodbye.\n")

    if collect is not None:
        collect.report(driver.cycle)
    if args.debug:
        driver.show_runtime_report()
    return 0
