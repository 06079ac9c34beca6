"""
CLI (Command Line Interface).

Compare weekly course schedules stored as JSON files (or shared on the
schedule website), e.g.:

    schedcompare compare anna.json ben.json
    schedcompare compare anna.json --share-code K3X9QA --server https://example.org
    schedcompare conflicts group.json
    schedcompare free-time anna.json ben.json --work-days 1,2,3,4,5 --min-free 90
    schedcompare common anna.json ben.json --json

Every analysis command accepts the work-window flags and --config <file.json>.
Errors are printed as one line and the command exits with code 1.
"""

from __future__ import annotations

import argparse
import json
from typing import Any, List

from rich.console import Console

from schedcompare.compare import compare_schedules, find_common_courses
from schedcompare.config import AnalysisOptions, load_options
from schedcompare.conflicts import find_time_conflicts
from schedcompare.errors import InvalidInput, ScheduleError
from schedcompare.fetch import fetch_shared_schedule
from schedcompare.freetime import find_common_free_time
from schedcompare.model import Schedule
from schedcompare.render import print_common_courses, print_conflicts, print_free_time, print_report
from schedcompare.storage import load_schedules, save_report

DEFAULT_SERVER = "http://localhost:10000"


def _parse_work_days(text: str) -> List[int]:
    try:
        return [int(x) for x in text.split(",") if x.strip()]
    except ValueError as exc:
        raise InvalidInput(f"Invalid --work-days value: {text!r}") from exc


def _options_from_args(args: argparse.Namespace) -> AnalysisOptions:
    """
    Config file first, then flags on top.
    """
    options = load_options(args.config) if args.config else AnalysisOptions()
    return options.merged(
        {
            "workDays": _parse_work_days(args.work_days) if args.work_days else None,
            "workHourStart": args.work_start,
            "workHourEnd": args.work_end,
            "minFreeMinutes": args.min_free,
        }
    )


def _load_inputs(args: argparse.Namespace) -> List[Schedule]:
    """
    Collect schedules from all given files, then from share codes (in that order).
    """
    schedules: List[Schedule] = []
    for path in args.files:
        schedules.extend(load_schedules(path))
    for code in args.share_code or []:
        schedules.append(fetch_shared_schedule(args.server, code))
    return schedules


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _cmd_compare(args: argparse.Namespace) -> int:
    report = compare_schedules(_load_inputs(args), _options_from_args(args))

    if args.out:
        save_report(report, args.out)
        print(f"Report written to: {args.out}")

    if args.json:
        _print_json(report.to_dict())
    else:
        print_report(report, Console())
    return 0


def _cmd_conflicts(args: argparse.Namespace) -> int:
    conflicts = find_time_conflicts(_load_inputs(args), _options_from_args(args))
    if args.json:
        _print_json([c.to_dict() for c in conflicts])
    else:
        print_conflicts(conflicts, Console())
    return 0


def _cmd_free_time(args: argparse.Namespace) -> int:
    free = find_common_free_time(_load_inputs(args), _options_from_args(args))
    if args.json:
        _print_json([f.to_dict() for f in free])
    else:
        print_free_time(free, Console())
    return 0


def _cmd_common(args: argparse.Namespace) -> int:
    names = find_common_courses(_load_inputs(args))
    if args.json:
        _print_json(names)
    else:
        print_common_courses(names, Console())
    return 0


def _add_common_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("files", nargs="*", help="Schedule JSON files")
    p.add_argument("--share-code", action="append", help="Share code of a public schedule (repeatable)")
    p.add_argument("--server", type=str, default=DEFAULT_SERVER, help="Schedule website base URL")
    p.add_argument("--config", type=str, help="JSON file with analysis options")
    p.add_argument("--work-days", type=str, help="Comma separated weekdays, 0=Sunday (e.g. 1,2,3,4,5)")
    p.add_argument("--work-start", type=str, help="Start of the work window (HH:MM)")
    p.add_argument("--work-end", type=str, help="End of the work window (HH:MM)")
    p.add_argument("--min-free", type=int, help="Minimum free window in minutes")
    p.add_argument("--json", action="store_true", help="Print JSON instead of tables")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="schedcompare", description="Compare weekly course schedules")
    sub = parser.add_subparsers(dest="command", required=True)

    p_compare = sub.add_parser("compare", help="Full comparison report")
    _add_common_arguments(p_compare)
    p_compare.add_argument("--out", type=str, help="Also write the JSON report to this file")

    p_conflicts = sub.add_parser("conflicts", help="Overlapping slots between schedules")
    _add_common_arguments(p_conflicts)

    p_free = sub.add_parser("free-time", help="Windows where every schedule is free")
    _add_common_arguments(p_free)

    p_common = sub.add_parser("common", help="Courses shared by all schedules")
    _add_common_arguments(p_common)

    return parser


_COMMANDS = {
    "compare": _cmd_compare,
    "conflicts": _cmd_conflicts,
    "free-time": _cmd_free_time,
    "common": _cmd_common,
}


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    handler = _COMMANDS[args.command]
    try:
        raise SystemExit(handler(args))
    except ScheduleError as exc:
        print(f"Error: {exc}")
        raise SystemExit(1)
