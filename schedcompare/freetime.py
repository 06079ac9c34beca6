"""
Common free time.

For every work day, all slots of all schedules are merged into busy
intervals; the gaps between them inside the work window are the windows
where nobody has a class.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from schedcompare.config import AnalysisOptions
from schedcompare.model import FreeTimeSlot, Schedule
from schedcompare.times import minutes_to_time
from schedcompare.validate import parse_schedule_slots

Interval = Tuple[int, int]


def merge_intervals(intervals: Iterable[Interval]) -> List[Interval]:
    """
    Merge overlapping or touching (start, end) intervals.

    Returns a new sorted list; the input is not modified.
    """
    merged: List[Interval] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1]:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def free_gaps(busy: Sequence[Interval], window_start: int, window_end: int) -> List[Interval]:
    """
    Gaps inside [window_start, window_end] not covered by the merged busy intervals.
    """
    gaps: List[Interval] = []
    cursor = window_start
    for start, end in busy:
        gap_end = min(start, window_end)
        if cursor < gap_end:
            gaps.append((cursor, gap_end))
        cursor = max(cursor, end)
    if cursor < window_end:
        gaps.append((cursor, window_end))
    return gaps


def find_common_free_time(
    schedules: Sequence[Schedule], options: Optional[AnalysisOptions] = None
) -> List[FreeTimeSlot]:
    """
    Free windows of at least options.min_free_minutes on each work day,
    ordered by day, then start time.
    """
    opts = options or AnalysisOptions()
    window_start = opts.work_start_minutes
    window_end = opts.work_end_minutes

    busy_by_day: dict[int, List[Interval]] = {day: [] for day in opts.work_days}
    for schedule in schedules:
        for day, start, end, _slot in parse_schedule_slots(schedule):
            if day in busy_by_day:
                busy_by_day[day].append((start, end))

    free: List[FreeTimeSlot] = []
    for day in sorted(busy_by_day):
        busy = merge_intervals(busy_by_day[day])
        for start, end in free_gaps(busy, window_start, window_end):
            duration = end - start
            if duration < opts.min_free_minutes:
                continue
            free.append(
                FreeTimeSlot(
                    day=day,
                    start_time=minutes_to_time(start),
                    end_time=minutes_to_time(end),
                    duration_minutes=duration,
                )
            )

    return free
