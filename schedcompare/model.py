"""
Central data model definitions used across the project.

Input types (Course, TimeSlot, Schedule) are frozen so the analyzer
can never change what it was given. Output types (ConflictRecord,
FreeTimeSlot, ScheduleStats, ComparisonReport) are built fresh on every
analysis call and know how to turn themselves into the camelCase JSON
shape the schedule website uses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Course:
    """
    One course of a schedule. Only name, credits and rating matter for analysis.
    """

    name: str
    teacher: str = ""
    credits: float = 0
    rating: Optional[float] = None


@dataclass(frozen=True)
class TimeSlot:
    """
    One recurring weekly course block.

    day_of_week: 0 = Sunday ... 6 = Saturday
    start_time / end_time: 'HH:MM', same day
    """

    day_of_week: int
    start_time: str
    end_time: str
    course_name: Optional[str] = None
    weeks: Tuple[int, ...] = ()


@dataclass(frozen=True)
class Schedule:
    """
    One person's (or one variant's) weekly schedule for a semester.
    """

    id: str
    name: str
    owner: str
    courses: Tuple[Course, ...] = ()
    slots: Tuple[TimeSlot, ...] = ()
    semester: Optional[str] = None

    @property
    def course_names(self) -> List[str]:
        return [c.name for c in self.courses]


@dataclass(frozen=True)
class ConflictRecord:
    day: int
    time1: str
    time2: str
    schedule1: str
    schedule2: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "day": self.day,
            "time1": self.time1,
            "time2": self.time2,
            "schedule1": self.schedule1,
            "schedule2": self.schedule2,
        }


@dataclass(frozen=True)
class FreeTimeSlot:
    day: int
    start_time: str
    end_time: str
    duration_minutes: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "day": self.day,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "durationMinutes": self.duration_minutes,
        }


@dataclass(frozen=True)
class ScheduleStats:
    name: str
    owner: str
    total_courses: int
    total_credits: float
    average_rating: float
    busy_hours: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "owner": self.owner,
            "totalCourses": self.total_courses,
            "totalCredits": self.total_credits,
            "averageRating": self.average_rating,
            "busyHours": self.busy_hours,
        }


@dataclass(frozen=True)
class ComparisonStatistics:
    total_schedules: int
    common_courses: int
    time_conflicts: int
    common_free_slots: int
    schedule_stats: List[ScheduleStats] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalSchedules": self.total_schedules,
            "commonCourses": self.common_courses,
            "timeConflicts": self.time_conflicts,
            "commonFreeSlots": self.common_free_slots,
            "scheduleStats": [s.to_dict() for s in self.schedule_stats],
        }


@dataclass(frozen=True)
class ComparisonReport:
    """
    Result of compare_schedules(). Serialized with to_dict() for JSON output.
    """

    common_courses: List[str]
    time_conflicts: List[ConflictRecord]
    common_free_time: List[FreeTimeSlot]
    statistics: ComparisonStatistics

    def to_dict(self) -> Dict[str, Any]:
        return {
            "commonCourses": list(self.common_courses),
            "timeConflicts": [c.to_dict() for c in self.time_conflicts],
            "commonFreeTime": [f.to_dict() for f in self.common_free_time],
            "statistics": self.statistics.to_dict(),
        }
