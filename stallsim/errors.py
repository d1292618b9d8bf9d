# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on May 4, 2020
# Last Update: Time-stamp: <2020-05-12 21:05:33 liux>
###############################################################

"""Invariant guards of the waiting queue and the occupancy registry.

These are raised only when a caller skips the checks the controllers
always perform first (queue length, vacancy, admitted group); in a
correct call sequence they never occur.

"""

__all__ = ["StallError", "EmptyQueueError", "CapacityExceededError",
           "GroupConflictError"]

class StallError(Exception):
    """Base class for all invariant violations in stallsim."""

class EmptyQueueError(StallError, IndexError):
    """Dequeue from an empty waiting queue."""

class CapacityExceededError(StallError, RuntimeError):
    """Admission attempted with no vacant slot."""

class GroupConflictError(StallError, ValueError):
    """Admission attempted for a group other than the admitted group."""
