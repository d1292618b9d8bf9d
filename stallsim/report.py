# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on May 8, 2020
# Last Update: Time-stamp: <2020-05-18 21:47:36 liux>
###############################################################

"""Console report of a cycle, as printed by the command line."""

__all__ = ["format_activity", "format_snapshot", "print_snapshot"]

_FORMATS = {
    'exit':  "%s(%d,%d) has exited stall %d.",
    'move':  "%s(%d,%d) has moved from the queue to stall %d.",
    'enter': "%s(%d,%d) has entered stall %d.",
    'queue': "%s(%d,%d) has entered the queue.",
}

def format_activity(a):
    """Return one line describing the activity; a person is shown as
    Group(id,usage)."""
    if a.slot is None:
        return _FORMATS[a.kind] % (a.group, a.person_id, a.usage)
    return _FORMATS[a.kind] % (a.group, a.person_id, a.usage, a.slot)

def format_snapshot(snap):
    """Return the multi-line report of the given snapshot."""

    lines = ['', '='*28, '          Cycle %d' % snap.cycle, '='*28, '']
    lines.append('***** Activity *****')
    lines.extend(format_activity(a) for a in snap.activity)

    lines.append('')
    lines.append('***** Occupancy *****')
    lines.append('Occupants: %d' % snap.occupant_count)
    lines.append('Group A Occupants: %d' % snap.group_a_count)
    lines.append('Group B Occupants: %d' % snap.group_b_count)

    lines.append('')
    lines.append('***** Queue *****')
    lines.append('Queue Length: %d' % snap.queue_length)
    lines.append('Group A Waiting: %d' % snap.queue_group_a_count)
    lines.append('Group B Waiting: %d' % snap.queue_group_b_count)
    lines.append('Queue Distribution:' +
                 ''.join(' %s(%d,%d)' % (g, i, r) for i, g, r in snap.queue_contents))

    lines.append('')
    lines.append('***** Remaining Stall Uses *****')
    lines.extend('Stall %d: %d' % (i, u) for i, u in enumerate(snap.slot_uses))
    return '\n'.join(lines)

def print_snapshot(snap, file=None):
    print(format_snapshot(snap), file=file)
