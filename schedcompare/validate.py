"""
Input validation shared by the analyzer operations.

Slots are parsed into (day, start_minutes, end_minutes) once here, so a
malformed slot stops the analysis before any result is built.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from schedcompare.config import AnalysisOptions
from schedcompare.errors import InvalidInput, MalformedSlot
from schedcompare.model import Schedule, TimeSlot
from schedcompare.times import time_to_minutes

ParsedSlot = Tuple[int, int, int, TimeSlot]


def parse_slot(schedule: Schedule, index: int, slot: TimeSlot) -> ParsedSlot:
    day = slot.day_of_week
    if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day <= 6:
        raise MalformedSlot(schedule.name, index, f"invalid day of week {day!r}")
    try:
        start = time_to_minutes(slot.start_time)
        end = time_to_minutes(slot.end_time)
    except ValueError as exc:
        raise MalformedSlot(schedule.name, index, str(exc)) from exc
    if end <= start:
        raise MalformedSlot(
            schedule.name, index, f"end time {slot.end_time} is not after start time {slot.start_time}"
        )
    return day, start, end, slot


def parse_schedule_slots(schedule: Schedule) -> List[ParsedSlot]:
    return [parse_slot(schedule, i, slot) for i, slot in enumerate(schedule.slots)]


def require_at_least_two(schedules: Sequence[Schedule]) -> None:
    if len(schedules) < 2:
        raise InvalidInput("at least two schedules required")


def check_limits(schedules: Sequence[Schedule], options: AnalysisOptions) -> None:
    """
    Keep the pairwise conflict scan bounded.
    """
    if len(schedules) > options.max_schedules:
        raise InvalidInput(f"too many schedules: {len(schedules)} (max {options.max_schedules})")
    total = sum(len(s.slots) for s in schedules)
    if total > options.max_total_slots:
        raise InvalidInput(f"too many slots: {total} (max {options.max_total_slots})")
