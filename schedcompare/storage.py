"""
Reading schedules from JSON and writing comparison reports.

Two input shapes are accepted for a schedule:

- the compact local format

      {"name": "Anna", "owner": "anna", "courses": ["Math", "Physics"],
       "slots": [{"dayOfWeek": 1, "startTime": "09:00", "endTime": "10:30"}]}

- a shared schedule as returned by the schedule website's REST API
  (populated "courses" objects and "scheduleSlots")

A file may hold one schedule object, a list of them, or {"schedules": [...]}.

Unlike a best-effort user preference file, broken input here is an error:
the caller has to know that a schedule could not be read.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from schedcompare.errors import InvalidInput
from schedcompare.model import ComparisonReport, Course, Schedule, TimeSlot


def _number_or_none(value: Any, course_name: str, field_name: str) -> Any:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"Course {course_name!r}: {field_name} must be a number, got {value!r}")
    return value


def _course_from_any(raw: Any) -> Course:
    if isinstance(raw, str):
        return Course(name=raw.strip())
    if not isinstance(raw, dict):
        raise InvalidInput(f"Invalid course entry: {raw!r}")

    name = str(raw.get("name", "") or "").strip()
    if not name:
        raise InvalidInput(f"Course without name: {raw!r}")

    rating = raw.get("rating")
    # website stores {"difficulty", "workload", "interest", "overall"}
    if isinstance(rating, dict):
        rating = rating.get("overall")

    return Course(
        name=name,
        teacher=str(raw.get("teacher", "") or "").strip(),
        credits=_number_or_none(raw.get("credits"), name, "credits") or 0,
        rating=_number_or_none(rating, name, "rating"),
    )


def _slot_course_name(raw: Dict[str, Any]) -> Optional[str]:
    if raw.get("courseName"):
        return str(raw["courseName"])
    course = raw.get("course")
    if isinstance(course, dict) and course.get("name"):
        return str(course["name"])
    return None


def _slot_from_any(raw: Any) -> TimeSlot:
    if not isinstance(raw, dict):
        raise InvalidInput(f"Invalid slot entry: {raw!r}")

    # Times stay as given; the analyzer reports malformed values as MalformedSlot
    weeks = raw.get("weeks") or []
    return TimeSlot(
        day_of_week=raw.get("dayOfWeek"),
        start_time=raw.get("startTime"),
        end_time=raw.get("endTime"),
        course_name=_slot_course_name(raw),
        weeks=tuple(weeks) if isinstance(weeks, list) else (),
    )


def schedule_from_dict(data: Dict[str, Any]) -> Schedule:
    """
    Build a Schedule from either supported JSON shape.
    """
    if not isinstance(data, dict):
        raise InvalidInput(f"Schedule must be a JSON object, got {type(data).__name__}")

    name = str(data.get("name", "") or "").strip()
    if not name:
        raise InvalidInput("Schedule without name")

    raw_courses = data.get("courses")
    if raw_courses is None:
        raw_courses = data.get("courseNames", [])
    raw_slots = data.get("slots")
    if raw_slots is None:
        raw_slots = data.get("scheduleSlots", [])
    if not isinstance(raw_courses, list) or not isinstance(raw_slots, list):
        raise InvalidInput(f"Schedule {name!r}: courses and slots must be lists")

    return Schedule(
        id=str(data.get("id") or data.get("_id") or name),
        name=name,
        owner=str(data.get("owner", "") or "").strip(),
        courses=tuple(_course_from_any(c) for c in raw_courses),
        slots=tuple(_slot_from_any(s) for s in raw_slots),
        semester=data.get("semester"),
    )


def load_schedules(path: str | Path) -> List[Schedule]:
    """
    Load all schedules contained in a JSON file.
    """
    schedule_path = Path(path)
    try:
        data = json.loads(schedule_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidInput(f"Cannot read schedule file {schedule_path}: {exc}") from exc

    if isinstance(data, dict) and "schedules" in data:
        data = data["schedules"]
    if isinstance(data, dict):
        return [schedule_from_dict(data)]
    if isinstance(data, list):
        return [schedule_from_dict(item) for item in data]

    raise InvalidInput(f"Schedule file {schedule_path} must contain an object or a list")


def save_report(report: ComparisonReport, path: str | Path) -> None:
    """
    Write the report as JSON. Creates parent directories if needed.
    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(report.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
