# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on May 4, 2020
# Last Update: Time-stamp: <2020-05-19 11:05:20 liux>
###############################################################

"""Stallsim is a cycle-stepped simulation of shared stalls, where at
most five occupants of the same group may be admitted at a time."""

import sys

if sys.version_info[:2] < (3, 6):
    raise ImportError("Stallsim requires Python 3.6 and above (%d.%d detected)." %
                      sys.version_info[:2])

from .utils import *
from .errors import *
from .person import *
from .waitqueue import *
from .registry import *
from .snapshot import *
from .admission import *
from .release import *
from .simulator import *
from .driver import *
from .report import *

__version__ = '0.1.0'
