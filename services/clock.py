"""
Wall-clock arithmetic for HH:MM schedule times

Times carry no date and no timezone. Adding minutes wraps around midnight
and discards the day count.
"""

import math
import re
from numbers import Real
from typing import Tuple

from error_handling import InvalidTimeFormat, ValidationError

MINUTES_PER_DAY = 24 * 60

CLOCK_PATTERN = re.compile(r"([01][0-9]|2[0-3]):([0-5][0-9])")


def is_valid_clock(value) -> bool:
    """True when value is a zero-padded 24-hour HH:MM string"""
    return isinstance(value, str) and CLOCK_PATTERN.fullmatch(value) is not None


def parse_clock(value) -> Tuple[int, int]:
    """
    Split an HH:MM string into (hour, minute)

    Raises:
        InvalidTimeFormat: value is not a zero-padded 24-hour HH:MM
    """
    if not isinstance(value, str):
        raise InvalidTimeFormat(value)
    match = CLOCK_PATTERN.fullmatch(value)
    if not match:
        raise InvalidTimeFormat(value)
    return int(match.group(1)), int(match.group(2))


def format_clock(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


def minutes_of_day(value: str) -> int:
    """Minutes elapsed since 00:00 for an HH:MM value"""
    hour, minute = parse_clock(value)
    return hour * 60 + minute


def add_minutes(time: str, minutes) -> str:
    """
    Add minutes to an HH:MM value with 24-hour wraparound

    Fractional minutes are rounded to the nearest whole minute (Python's
    round, half to even) before being applied. Negative minutes move the
    clock backwards.

    Args:
        time: Zero-padded HH:MM
        minutes: Any finite real number

    Returns:
        str: HH:MM, hour wrapped modulo 24

    Raises:
        InvalidTimeFormat: time is malformed
        ValidationError: minutes is not a finite number
    """
    start = minutes_of_day(time)

    if isinstance(minutes, bool) or not isinstance(minutes, Real) or not math.isfinite(minutes):
        raise ValidationError(f"Minutes must be a finite number, got {minutes!r}")

    total = (start + int(round(minutes))) % MINUTES_PER_DAY
    return format_clock(total // 60, total % 60)
