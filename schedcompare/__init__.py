"""
schedcompare: compare weekly course schedules.

Finds courses shared by all schedules, overlapping slots between
schedules, and the windows of the work week where everyone is free.
"""

from schedcompare.compare import compare_schedules, find_common_courses, schedule_statistics
from schedcompare.config import AnalysisOptions
from schedcompare.conflicts import find_time_conflicts
from schedcompare.errors import FetchError, InvalidInput, MalformedSlot, ScheduleError
from schedcompare.freetime import find_common_free_time
from schedcompare.model import (
    ComparisonReport,
    ComparisonStatistics,
    ConflictRecord,
    Course,
    FreeTimeSlot,
    Schedule,
    ScheduleStats,
    TimeSlot,
)

__all__ = [
    "AnalysisOptions",
    "ComparisonReport",
    "ComparisonStatistics",
    "ConflictRecord",
    "Course",
    "FetchError",
    "FreeTimeSlot",
    "InvalidInput",
    "MalformedSlot",
    "Schedule",
    "ScheduleError",
    "ScheduleStats",
    "TimeSlot",
    "compare_schedules",
    "find_common_courses",
    "find_common_free_time",
    "find_time_conflicts",
    "schedule_statistics",
]
