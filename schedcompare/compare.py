"""
Schedule comparison.

compare_schedules() is the single entry point used by the CLI (and by any
web handler wrapping this package): it validates the whole input first,
then combines common courses, cross-schedule conflicts, common free time
and a statistics rollup into one ComparisonReport.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from schedcompare.config import AnalysisOptions
from schedcompare.conflicts import find_time_conflicts
from schedcompare.freetime import find_common_free_time
from schedcompare.model import ComparisonReport, ComparisonStatistics, Schedule, ScheduleStats
from schedcompare.validate import check_limits, parse_schedule_slots, require_at_least_two


def _round1(value: float) -> float:
    # half-up, e.g. 2.25 -> 2.3 (round() would give 2.2)
    return math.floor(value * 10 + 0.5) / 10


def find_common_courses(schedules: Sequence[Schedule]) -> List[str]:
    """
    Course names present in every schedule, in the order of the first schedule.
    """
    require_at_least_two(schedules)

    common = list(dict.fromkeys(schedules[0].course_names))
    for schedule in schedules[1:]:
        names = set(schedule.course_names)
        common = [name for name in common if name in names]
    return common


def schedule_statistics(schedule: Schedule) -> ScheduleStats:
    courses = schedule.courses
    total_credits = sum(c.credits or 0 for c in courses)
    average_rating = sum(c.rating or 0 for c in courses) / len(courses) if courses else 0
    busy_minutes = sum(end - start for _day, start, end, _slot in parse_schedule_slots(schedule))

    return ScheduleStats(
        name=schedule.name,
        owner=schedule.owner,
        total_courses=len(courses),
        total_credits=total_credits,
        average_rating=_round1(average_rating),
        busy_hours=_round1(busy_minutes / 60),
    )


def compare_schedules(
    schedules: Sequence[Schedule], options: Optional[AnalysisOptions] = None
) -> ComparisonReport:
    """
    Compare two or more schedules.

    Raises:
        InvalidInput: fewer than two schedules, or a size limit exceeded
        MalformedSlot: any slot of any schedule fails validation
    """
    opts = options or AnalysisOptions()
    require_at_least_two(schedules)
    check_limits(schedules, opts)

    # Fail before building anything if a single slot is bad
    for schedule in schedules:
        parse_schedule_slots(schedule)

    common_courses = find_common_courses(schedules)
    conflicts = find_time_conflicts(schedules, opts)
    free_time = find_common_free_time(schedules, opts)

    statistics = ComparisonStatistics(
        total_schedules=len(schedules),
        common_courses=len(common_courses),
        time_conflicts=len(conflicts),
        common_free_slots=len(free_time),
        schedule_stats=[schedule_statistics(s) for s in schedules],
    )

    return ComparisonReport(
        common_courses=common_courses,
        time_conflicts=conflicts,
        common_free_time=free_time,
        statistics=statistics,
    )
