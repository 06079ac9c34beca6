"""
Analysis options.

Defaults reproduce the website's fixed values:
work days Monday-Friday, work hours 08:00-22:00, free windows of at
least 60 minutes. They can be overridden per call, from a JSON config
file, or from CLI flags.

Config file format (every key optional):

    {
      "workDays": [1, 2, 3, 4, 5],
      "workHourStart": "08:00",
      "workHourEnd": "22:00",
      "minFreeMinutes": 60,
      "maxSchedules": 100,
      "maxTotalSlots": 10000
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, FrozenSet, Mapping

from schedcompare.errors import InvalidInput
from schedcompare.times import time_to_minutes

DEFAULT_WORK_DAYS: FrozenSet[int] = frozenset({1, 2, 3, 4, 5})
DEFAULT_WORK_HOUR_START = "08:00"
DEFAULT_WORK_HOUR_END = "22:00"
DEFAULT_MIN_FREE_MINUTES = 60
DEFAULT_MAX_SCHEDULES = 100
DEFAULT_MAX_TOTAL_SLOTS = 10_000

# JSON key -> dataclass field
_KEYS = {
    "workDays": "work_days",
    "workHourStart": "work_hour_start",
    "workHourEnd": "work_hour_end",
    "minFreeMinutes": "min_free_minutes",
    "maxSchedules": "max_schedules",
    "maxTotalSlots": "max_total_slots",
}


@dataclass(frozen=True)
class AnalysisOptions:
    work_days: FrozenSet[int] = field(default=DEFAULT_WORK_DAYS)
    work_hour_start: str = DEFAULT_WORK_HOUR_START
    work_hour_end: str = DEFAULT_WORK_HOUR_END
    min_free_minutes: int = DEFAULT_MIN_FREE_MINUTES
    max_schedules: int = DEFAULT_MAX_SCHEDULES
    max_total_slots: int = DEFAULT_MAX_TOTAL_SLOTS

    def __post_init__(self) -> None:
        # accept any iterable of days, store a frozenset
        try:
            days = frozenset(self.work_days)
        except TypeError as exc:
            raise InvalidInput(f"Invalid work days: {self.work_days!r}") from exc
        object.__setattr__(self, "work_days", days)
        self.validate()

    @property
    def work_start_minutes(self) -> int:
        return time_to_minutes(self.work_hour_start)

    @property
    def work_end_minutes(self) -> int:
        return time_to_minutes(self.work_hour_end)

    def validate(self) -> None:
        """
        Raise InvalidInput if any option is out of range.
        """
        for day in self.work_days:
            if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day <= 6:
                raise InvalidInput(f"Invalid work day: {day!r} (expected 0-6)")

        try:
            start = time_to_minutes(self.work_hour_start)
            end = time_to_minutes(self.work_hour_end)
        except ValueError as exc:
            raise InvalidInput(f"Invalid work hours: {exc}") from exc
        if end <= start:
            raise InvalidInput(
                f"Work hours end ({self.work_hour_end}) must be after start ({self.work_hour_start})"
            )

        if not isinstance(self.min_free_minutes, int) or self.min_free_minutes < 0:
            raise InvalidInput(f"minFreeMinutes must be a non-negative integer, got {self.min_free_minutes!r}")
        if not isinstance(self.max_schedules, int) or self.max_schedules < 2:
            raise InvalidInput(f"maxSchedules must be at least 2, got {self.max_schedules!r}")
        if not isinstance(self.max_total_slots, int) or self.max_total_slots < 1:
            raise InvalidInput(f"maxTotalSlots must be positive, got {self.max_total_slots!r}")

    def merged(self, overrides: Mapping[str, Any]) -> "AnalysisOptions":
        """
        Return a copy with the given camelCase keys replaced. None values are ignored.
        """
        changes: dict[str, Any] = {}
        for key, value in overrides.items():
            if key not in _KEYS:
                raise InvalidInput(f"Unknown option: {key!r}")
            if value is not None:
                changes[_KEYS[key]] = value
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AnalysisOptions":
        return cls().merged(data)


def load_options(path: str | Path) -> AnalysisOptions:
    """
    Read options from a JSON config file.
    """
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidInput(f"Cannot read config file {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidInput(f"Config file {config_path} must contain a JSON object")
    return AnalysisOptions.from_mapping(data)
