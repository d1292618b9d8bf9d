# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on May 5, 2020
# Last Update: Time-stamp: <2020-05-18 17:02:11 liux>
###############################################################

"""Read-only views of the state published at the end of each cycle."""

from collections import namedtuple

from .utils import GROUP

__all__ = ["Activity", "Snapshot", "take_snapshot"]

# kind is one of 'exit' (left a stall), 'move' (from the queue into a
# stall), 'enter' (arrived and went straight into a stall), and
# 'queue' (arrived and joined the queue); slot is None for 'queue'
Activity = namedtuple('Activity', ['kind', 'person_id', 'group', 'usage', 'slot'])

def _activity(kind, p, slot=None):
    return Activity(kind, p.id, p.group, p.usage, slot)

Snapshot = namedtuple('Snapshot', [
    'cycle',
    'occupant_count',
    'group_a_count',
    'group_b_count',
    'admitted_group',
    'queue_length',
    'queue_group_a_count',
    'queue_group_b_count',
    'queue_contents',   # ((id, group, remaining), ...) head first
    'slot_uses',        # remaining uses per stall, zero if empty
    'activity',         # Activity records in the order they happened
])

def take_snapshot(cycle, registry, queue, activity=()):
    """Capture the registry and the queue as an immutable snapshot."""
    return Snapshot(
        cycle=cycle,
        occupant_count=registry.num_occupants(),
        group_a_count=registry.count(GROUP.A),
        group_b_count=registry.count(GROUP.B),
        admitted_group=registry.admitted_group,
        queue_length=len(queue),
        queue_group_a_count=queue.count_by_group(GROUP.A),
        queue_group_b_count=queue.count_by_group(GROUP.B),
        queue_contents=tuple((p.id, p.group, p.remaining) for p in queue),
        slot_uses=tuple(registry.slot_uses()),
        activity=tuple(activity))
