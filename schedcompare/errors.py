"""
Error types raised by the schedule analyzer.

All of them derive from ValueError, so callers that only care about
"bad input" can catch that one class.
"""

from __future__ import annotations

from typing import Optional


class ScheduleError(ValueError):
    """Base class for every error raised by schedcompare."""


class InvalidInput(ScheduleError):
    """Too few schedules, a size limit exceeded, or invalid options."""


class MalformedSlot(ScheduleError):
    """
    A slot with an unparsable time, an invalid weekday,
    or an end time that is not after its start time.
    """

    def __init__(self, schedule_name: str, slot_index: int, reason: str) -> None:
        self.schedule_name = schedule_name
        self.slot_index = slot_index
        self.reason = reason
        super().__init__(f"schedule {schedule_name!r}, slot #{slot_index}: {reason}")


class FetchError(ScheduleError):
    """The remote schedule server could not deliver a schedule."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)
