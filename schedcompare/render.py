"""
Terminal rendering of comparison results with rich tables.
"""

from __future__ import annotations

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from schedcompare.model import ComparisonReport, ConflictRecord, FreeTimeSlot, ScheduleStats
from schedcompare.times import day_name


def _hours(minutes: int) -> str:
    h, m = divmod(minutes, 60)
    return f"{h}h{m:02d}" if m else f"{h}h"


def common_courses_table(names: List[str]) -> Table:
    table = Table(title="Common courses", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Course")
    for i, name in enumerate(names, start=1):
        table.add_row(str(i), f"[bold cyan]{name}[/]")
    return table


def conflicts_table(conflicts: List[ConflictRecord]) -> Table:
    table = Table(title="Time conflicts", box=box.SIMPLE)
    table.add_column("Day")
    table.add_column("Schedule 1")
    table.add_column("Time 1")
    table.add_column("Schedule 2")
    table.add_column("Time 2")
    for c in conflicts:
        table.add_row(day_name(c.day), f"[magenta]{c.schedule1}[/]", c.time1, f"[magenta]{c.schedule2}[/]", c.time2)
    return table


def free_time_table(slots: List[FreeTimeSlot]) -> Table:
    table = Table(title="Common free time", box=box.SIMPLE)
    table.add_column("Day")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Duration", justify="right")
    for f in slots:
        table.add_row(day_name(f.day), f.start_time, f.end_time, f"[green]{_hours(f.duration_minutes)}[/]")
    return table


def stats_table(stats: List[ScheduleStats]) -> Table:
    table = Table(title="Schedules", box=box.SIMPLE)
    table.add_column("Name")
    table.add_column("Owner")
    table.add_column("Courses", justify="right")
    table.add_column("Credits", justify="right")
    table.add_column("Avg rating", justify="right")
    table.add_column("Busy h/week", justify="right")
    for s in stats:
        table.add_row(
            f"[bold cyan]{s.name}[/]",
            s.owner,
            str(s.total_courses),
            f"{s.total_credits:g}",
            f"{s.average_rating:.1f}",
            f"{s.busy_hours:.1f}",
        )
    return table


def print_conflicts(conflicts: List[ConflictRecord], console: Optional[Console] = None) -> None:
    console = console or Console()
    if not conflicts:
        console.print("No conflicts found.")
        return
    console.print(f"Conflicts found: [yellow]{len(conflicts)}[/]")
    console.print(conflicts_table(conflicts))


def print_free_time(slots: List[FreeTimeSlot], console: Optional[Console] = None) -> None:
    console = console or Console()
    if not slots:
        console.print("No common free time.")
        return
    console.print(free_time_table(slots))


def print_common_courses(names: List[str], console: Optional[Console] = None) -> None:
    console = console or Console()
    if not names:
        console.print("No common courses.")
        return
    console.print(common_courses_table(names))


def print_report(report: ComparisonReport, console: Optional[Console] = None) -> None:
    console = console or Console()
    st = report.statistics

    console.print("\n=== Schedule comparison ===")
    console.print(
        f"Schedules: {st.total_schedules} | common courses: {st.common_courses} | "
        f"conflicts: {st.time_conflicts} | common free slots: {st.common_free_slots}"
    )
    console.print(stats_table(st.schedule_stats))
    print_common_courses(report.common_courses, console)
    print_conflicts(report.time_conflicts, console)
    print_free_time(report.common_free_time, console)
