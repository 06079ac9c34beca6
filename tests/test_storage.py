"""
Unit tests for reading schedules from JSON and writing reports.

Storage contract:
- compact local format and the website's shared-schedule format are both accepted
- a file may hold one schedule, a list, or {"schedules": [...]}
- unreadable or invalid files raise InvalidInput
"""

import json
import tempfile
import unittest
from pathlib import Path

from schedcompare.compare import compare_schedules
from schedcompare.errors import InvalidInput
from schedcompare.storage import load_schedules, save_report, schedule_from_dict

COMPACT = {
    "name": "Anna",
    "owner": "anna",
    "courses": ["Math", {"name": "Physics", "credits": 3, "rating": 4}],
    "slots": [{"dayOfWeek": 1, "startTime": "09:00", "endTime": "10:30", "courseName": "Math"}],
}

WEBSITE = {
    "_id": "65f0c0ffee",
    "name": "Ben's plan",
    "owner": "ben",
    "semester": "2025-2026-1",
    "courses": [
        {"name": "Physics", "teacher": "Dr. Li", "credits": 4, "rating": {"overall": 5, "difficulty": 3}},
    ],
    "scheduleSlots": [
        {"dayOfWeek": 1, "startTime": "10:00", "endTime": "11:00", "weeks": [1, 2, 3], "course": {"name": "Physics"}},
    ],
    "statistics": {"totalCourses": 1},
}


class TestScheduleFromDict(unittest.TestCase):
    def test_compact_format(self) -> None:
        s = schedule_from_dict(COMPACT)
        self.assertEqual(s.id, "Anna")
        self.assertEqual(s.course_names, ["Math", "Physics"])
        self.assertEqual(s.courses[1].credits, 3)
        self.assertEqual(s.courses[1].rating, 4)
        self.assertEqual(s.slots[0].day_of_week, 1)
        self.assertEqual(s.slots[0].course_name, "Math")

    def test_website_format(self) -> None:
        s = schedule_from_dict(WEBSITE)
        self.assertEqual(s.id, "65f0c0ffee")
        self.assertEqual(s.semester, "2025-2026-1")
        self.assertEqual(s.courses[0].teacher, "Dr. Li")
        self.assertEqual(s.courses[0].rating, 5)
        self.assertEqual(s.slots[0].weeks, (1, 2, 3))
        self.assertEqual(s.slots[0].course_name, "Physics")

    def test_course_names_only(self) -> None:
        s = schedule_from_dict({"name": "C", "courseNames": ["Art"], "slots": []})
        self.assertEqual(s.course_names, ["Art"])

    def test_invalid_documents(self) -> None:
        for bad in [
            [],
            {"owner": "x"},
            {"name": "X", "slots": "mon"},
            {"name": "X", "courses": [42]},
            {"name": "X", "courses": [{"name": "Math", "credits": "3"}]},
            {"name": "X", "courses": [{"name": "Math", "credits": True}]},
            {"name": "X", "courses": [{"name": "Math", "rating": "4"}]},
            {"name": "X", "courses": [{"name": "Math", "rating": {"overall": "good"}}]},
        ]:
            with self.subTest(doc=bad):
                with self.assertRaises(InvalidInput):
                    schedule_from_dict(bad)  # type: ignore[arg-type]


class TestLoadAndSave(unittest.TestCase):
    def test_load_shapes(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            single = Path(d) / "single.json"
            single.write_text(json.dumps(COMPACT), encoding="utf-8")
            many = Path(d) / "many.json"
            many.write_text(json.dumps([COMPACT, WEBSITE]), encoding="utf-8")
            wrapped = Path(d) / "wrapped.json"
            wrapped.write_text(json.dumps({"schedules": [WEBSITE]}), encoding="utf-8")

            self.assertEqual(len(load_schedules(single)), 1)
            self.assertEqual([s.name for s in load_schedules(many)], ["Anna", "Ben's plan"])
            self.assertEqual(load_schedules(wrapped)[0].owner, "ben")

    def test_load_broken_or_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            broken = Path(d) / "broken.json"
            broken.write_text("[{", encoding="utf-8")
            with self.assertRaises(InvalidInput):
                load_schedules(broken)
            with self.assertRaises(InvalidInput):
                load_schedules(Path(d) / "missing.json")

    def test_save_report(self) -> None:
        report = compare_schedules([schedule_from_dict(COMPACT), schedule_from_dict(WEBSITE)])
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "out" / "report.json"
            save_report(report, p)
            data = json.loads(p.read_text(encoding="utf-8"))
            self.assertEqual(data["commonCourses"], ["Physics"])
            self.assertEqual(data["statistics"]["timeConflicts"], 1)
            self.assertEqual(data["statistics"]["scheduleStats"][1]["totalCredits"], 4)


if __name__ == "__main__":
    unittest.main()
