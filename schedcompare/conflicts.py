"""
Conflict detection.

Given several schedules, detect overlapping slots of *different* schedules
on the same weekday.
Overlap rule:
    start < other_end AND other_start < end
Touching slots (end == other start) do not conflict.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from schedcompare.config import AnalysisOptions
from schedcompare.model import ConflictRecord, Schedule
from schedcompare.times import format_range, minutes_to_time
from schedcompare.validate import check_limits, parse_schedule_slots


def _overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    return a_start < b_end and b_start < a_end


def _range(start: int, end: int) -> str:
    return format_range(minutes_to_time(start), minutes_to_time(end))


def find_time_conflicts(
    schedules: Sequence[Schedule], options: Optional[AnalysisOptions] = None
) -> List[ConflictRecord]:
    """
    Find overlapping slot pairs across schedules, each pair reported once (i<j
    over all slots flattened in input order).

    Slots of the same schedule are never compared with each other.
    Raises MalformedSlot for unparsable slots and InvalidInput if the total
    slot count exceeds options.max_total_slots.
    """
    opts = options or AnalysisOptions()
    check_limits(schedules, opts)

    # Flatten once: (schedule index, day, start, end)
    flat: List[Tuple[int, int, int, int]] = []
    for index, schedule in enumerate(schedules):
        for day, start, end, _slot in parse_schedule_slots(schedule):
            flat.append((index, day, start, end))

    conflicts: List[ConflictRecord] = []

    # O(n^2) is fine for a semester's worth of slots
    for i in range(len(flat)):
        idx1, d1, s1, e1 = flat[i]
        for j in range(i + 1, len(flat)):
            idx2, d2, s2, e2 = flat[j]
            if idx1 == idx2 or d1 != d2:
                continue
            if _overlaps(s1, e1, s2, e2):
                conflicts.append(
                    ConflictRecord(
                        day=d1,
                        time1=_range(s1, e1),
                        time2=_range(s2, e2),
                        schedule1=schedules[idx1].name,
                        schedule2=schedules[idx2].name,
                    )
                )

    return conflicts
