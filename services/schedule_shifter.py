"""
Cascading schedule shift for a single channel timeline

Inserting, resizing or removing one program pushes every later program on
the same channel so the timeline stays back to back from that program
onward. Programs before the anchor and programs on other channels are never
touched.

Ordering is a plain string comparison of HH:MM start times. That matches
chronological order within one day only: a timeline that runs past midnight
sorts "00:10" ahead of "23:50". No day rollover is attempted here.
"""

import logging
from typing import Iterable, List

from services.clock import add_minutes

logger = logging.getLogger(__name__)


def channel_timeline(programs: Iterable, channel_id) -> List:
    """Programs on channel_id sorted by start time (stable for equal times)"""
    timeline = [p for p in programs if p.channel_id == channel_id]
    timeline.sort(key=lambda p: p.start_time)
    return timeline


def shift_channel_schedule(programs: Iterable, channel_id, anchor_program_id) -> List:
    """
    Re-cascade start times after the anchor program on one channel

    Each program after the anchor starts exactly when its predecessor ends,
    computed from the predecessor's already-updated start time. Programs are
    mutated in place.

    Callers follow these protocols:
        insert: add the program to the collection, then shift from it
        edit:   apply new channel/start/duration first, then shift from it
        delete: set its duration to 0, shift from it, then remove it

    Args:
        programs: Any iterable of objects with id, channel_id, start_time
                  and duration attributes (other channels are ignored)
        channel_id: Channel whose timeline is shifted
        anchor_program_id: Program the shift cascades from

    Returns:
        list: The channel timeline in start-time order. Left untouched when
              the anchor is not on this channel.
    """
    timeline = channel_timeline(programs, channel_id)

    anchor_index = next((i for i, p in enumerate(timeline) if p.id == anchor_program_id), None)
    if anchor_index is None:
        logger.debug(f"Nothing to shift: program {anchor_program_id} not on channel {channel_id}")
        return timeline

    for i in range(anchor_index + 1, len(timeline)):
        previous = timeline[i - 1]
        timeline[i].start_time = add_minutes(previous.start_time, previous.duration)

    shifted = len(timeline) - anchor_index - 1
    logger.info(f"Shifted {shifted} program(s) after {anchor_program_id} on channel {channel_id}")
    return timeline
