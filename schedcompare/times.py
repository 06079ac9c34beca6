"""
Time helpers.

All analysis works on whole minutes since midnight.
'HH:MM' strings are parsed once at the boundary and formatted back
only when output records are built.
"""

from __future__ import annotations

import re

# Same pattern the schedule website validates slot times with (hour may be 1 digit)
_TIME_RE = re.compile(r"^([01]?[0-9]|2[0-3]):([0-5][0-9])$")

MINUTES_PER_DAY = 24 * 60

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


def time_to_minutes(hhmm: str) -> int:
    """
    Convert 'HH:MM' to minutes since midnight.
    Raises ValueError for invalid formats.
    """
    if not isinstance(hhmm, str):
        raise ValueError(f"Invalid time format: {hhmm!r}")
    match = _TIME_RE.match(hhmm.strip())
    if not match:
        raise ValueError(f"Invalid time format: {hhmm!r}")
    return int(match.group(1)) * 60 + int(match.group(2))


def minutes_to_time(minutes: int) -> str:
    """
    Convert minutes since midnight back to zero-padded 'HH:MM'.
    """
    if not 0 <= minutes <= MINUTES_PER_DAY:
        raise ValueError(f"Minutes out of range: {minutes}")
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def format_range(start: str, end: str) -> str:
    return f"{start}-{end}"


def day_name(day: int) -> str:
    if 0 <= day < len(DAY_NAMES):
        return DAY_NAMES[day]
    return str(day)
