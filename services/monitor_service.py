"""
Channel monitor - what is on air now, what comes next, and schedule totals

Start times have no date. To place them against a real clock, a start more
than twelve hours ahead of the current hour is read as yesterday (for the
on-air check) and one more than twelve hours behind as tomorrow (for the
up-next ordering).
"""

import logging
from collections import Counter
from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple

from models import PROGRAM_TYPES, Program
from services.channel_service import ChannelService
from services.clock import parse_clock
from services.program_service import ProgramService

logger = logging.getLogger(__name__)

OVERNIGHT_WRAP_HOURS = 12


def air_window(program, now: datetime) -> Tuple[datetime, datetime]:
    """Start and end datetimes of the airing that could include now"""
    hour, minute = parse_clock(program.start_time)
    start = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if hour > now.hour and hour - now.hour > OVERNIGHT_WRAP_HOURS:
        start -= timedelta(days=1)
    return start, start + timedelta(minutes=program.duration)


def is_on_air(program, now: datetime) -> bool:
    start, end = air_window(program, now)
    return start <= now < end


def next_start(program, now: datetime) -> datetime:
    """Start datetime relative to now, used to order a channel from the current time"""
    hour, minute = parse_clock(program.start_time)
    start = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if hour < now.hour and now.hour - hour > OVERNIGHT_WRAP_HOURS:
        start += timedelta(days=1)
    return start


class MonitorService:
    """Service backing the console's channel monitor and station statistics"""

    @staticmethod
    def now_playing(channel_id: str, now: Optional[datetime] = None) -> Optional[Program]:
        now = now or datetime.now()
        ChannelService.get_channel(channel_id)
        for program in ProgramService.list_programs(channel_id):
            if is_on_air(program, now):
                return program
        return None

    @staticmethod
    def up_next(channel_id: str, now: Optional[datetime] = None) -> Optional[Program]:
        """
        The program following the one on air, or the next one to start

        Returns None when the channel is empty or nothing follows.
        """
        now = now or datetime.now()
        programs = ProgramService.list_programs(channel_id)
        if not programs:
            return None

        programs.sort(key=lambda p: next_start(p, now))
        current = MonitorService.now_playing(channel_id, now)

        if current:
            index = next(i for i, p in enumerate(programs) if p.id == current.id)
            return programs[index + 1] if index < len(programs) - 1 else None

        return next((p for p in programs if next_start(p, now) > now), None)

    @staticmethod
    def schedule_stats() -> Dict:
        """Totals shown on the console's station status panel"""
        programs = ProgramService.list_programs()
        total_minutes = sum(p.duration for p in programs)
        by_type = Counter(p.type for p in programs)
        by_channel = Counter(p.channel_id for p in programs)

        return {
            "totalPrograms": len(programs),
            "totalAirTimeMinutes": total_minutes,
            "totalAirTime": {"hours": total_minutes // 60, "minutes": total_minutes % 60},
            "byType": {t: by_type.get(t, 0) for t in PROGRAM_TYPES},
            "byChannel": {c.id: by_channel.get(c.id, 0) for c in ChannelService.list_channels()},
        }
