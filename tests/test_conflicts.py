"""
Unit tests for conflict detection.

Definition used here:
- A conflict exists if two slots of *different* schedules overlap on the same weekday.
- Touching endpoints (end == start) is NOT a conflict.
"""

import unittest

from schedcompare.config import AnalysisOptions
from schedcompare.conflicts import find_time_conflicts
from schedcompare.errors import InvalidInput, MalformedSlot
from schedcompare.model import Schedule, TimeSlot


def _sched(name: str, *slots: tuple) -> Schedule:
    return Schedule(id=name, name=name, owner=name.lower(), slots=tuple(TimeSlot(*s) for s in slots))


class TestConflicts(unittest.TestCase):
    def test_overlap_same_day(self) -> None:
        a = _sched("A", (1, "09:00", "10:30"))
        b = _sched("B", (1, "10:00", "11:00"))
        confs = find_time_conflicts([a, b])
        self.assertEqual(len(confs), 1)
        c = confs[0]
        self.assertEqual(c.day, 1)
        self.assertEqual(c.time1, "09:00-10:30")
        self.assertEqual(c.time2, "10:00-11:00")
        self.assertEqual((c.schedule1, c.schedule2), ("A", "B"))

    def test_no_overlap_touching_end(self) -> None:
        a = _sched("A", (1, "10:00", "11:00"))
        b = _sched("B", (1, "11:00", "12:00"))
        self.assertEqual(find_time_conflicts([a, b]), [])

    def test_different_day_no_conflict(self) -> None:
        a = _sched("A", (1, "10:00", "11:00"))
        b = _sched("B", (2, "10:30", "12:00"))
        self.assertEqual(find_time_conflicts([a, b]), [])

    def test_same_schedule_slots_never_conflict(self) -> None:
        a = _sched("A", (3, "09:00", "11:00"), (3, "10:00", "12:00"))
        self.assertEqual(find_time_conflicts([a]), [])

        b = _sched("B", (4, "09:00", "10:00"))
        self.assertEqual(find_time_conflicts([a, b]), [])

    def test_order_is_irrelevant_for_conflict_pairs(self) -> None:
        a = _sched("A", (1, "09:00", "10:30"), (2, "14:00", "16:00"), (5, "08:00", "09:00"))
        b = _sched("B", (1, "10:00", "11:00"), (2, "15:00", "15:30"), (2, "15:45", "17:00"))

        def pairs(confs):
            return {
                frozenset([(c.schedule1, c.time1), (c.schedule2, c.time2)]) for c in confs
            }

        ab = find_time_conflicts([a, b])
        ba = find_time_conflicts([b, a])
        self.assertEqual(len(ab), 3)
        self.assertEqual(len(ab), len(ba))
        self.assertEqual(pairs(ab), pairs(ba))

    def test_three_schedules_output_order(self) -> None:
        a = _sched("A", (1, "09:00", "10:00"))
        b = _sched("B", (1, "09:30", "10:30"))
        c = _sched("C", (1, "09:45", "11:00"))
        confs = find_time_conflicts([a, b, c])
        self.assertEqual(
            [(x.schedule1, x.schedule2) for x in confs],
            [("A", "B"), ("A", "C"), ("B", "C")],
        )

    def test_times_are_normalized(self) -> None:
        a = _sched("A", (1, "9:00", "10:30"))
        b = _sched("B", (1, "10:00", "11:00"))
        self.assertEqual(find_time_conflicts([a, b])[0].time1, "09:00-10:30")

    def test_malformed_slot_raises(self) -> None:
        a = _sched("A", (1, "09:00", "10:30"))
        b = _sched("B", (1, "10:00", "9:00"))
        with self.assertRaises(MalformedSlot) as ctx:
            find_time_conflicts([a, b])
        self.assertEqual(ctx.exception.schedule_name, "B")
        self.assertEqual(ctx.exception.slot_index, 0)

    def test_slot_limit(self) -> None:
        a = _sched("A", (1, "09:00", "10:00"), (2, "09:00", "10:00"))
        b = _sched("B", (1, "09:00", "10:00"))
        with self.assertRaises(InvalidInput):
            find_time_conflicts([a, b], AnalysisOptions(max_total_slots=2))


if __name__ == "__main__":
    unittest.main()
