"""
Scadenzario CLI

Command-line interface for deadline calculation.

Usage:
    scadenzario compute 171-ter 2025-10-15
    scadenzario compute appeal-long 2025-08-10 --suspension --json
    scadenzario trace 2025-09-10 30 --suspension
    scadenzario holidays 2026
    scadenzario macros
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import MAXYEAR, MINYEAR
from typing import Optional, Sequence

from . import __version__
from .config import Settings, build_calendar, get_settings
from .engine import BACKWARD, FORWARD, DeadlineCalculator, list_macro_types
from .exceptions import InvalidDateInput, ScadenzarioError
from .models import MacroConfiguration, format_deadline_date

logger = logging.getLogger(__name__)


def _calculator(settings: Settings) -> DeadlineCalculator:
    return DeadlineCalculator(calendar=build_calendar(settings))


def _suspension(args: argparse.Namespace, settings: Settings) -> bool:
    if args.suspension is None:
        return settings.include_suspension
    return args.suspension


def cmd_compute(args: argparse.Namespace, settings: Settings) -> int:
    """Compute the deadlines of a macro."""
    config = MacroConfiguration.create(
        args.macro_type, args.date, _suspension(args, settings)
    )
    results = _calculator(settings).calculate(config)

    if args.json:
        print(json.dumps({
            "macro_type": config.macro_type.value,
            "reference_date": config.reference_date.isoformat(),
            "include_suspension": config.include_suspension,
            "deadlines": [r.to_dict() for r in results],
        }, indent=2, ensure_ascii=False))
        return 0

    suspension = "sì" if config.include_suspension else "no"
    print(f"{config.macro_type.value} - riferimento "
          f"{format_deadline_date(config.reference_date, settings.date_format)} "
          f"(sospensione feriale: {suspension})")
    print("-" * 70)
    for r in results:
        offset = f"{r.offset_days:+d}g" if r.offset_days else ""
        print(f"{format_deadline_date(r.result_date, settings.date_format):<12} "
              f"{offset:>6}  {r.label}")
    return 0


def cmd_trace(args: argparse.Namespace, settings: Settings) -> int:
    """Show every step of a calendar day count."""
    direction = FORWARD if args.forward else BACKWARD
    steps = _calculator(settings).trace(
        args.date, args.days, _suspension(args, settings), direction
    )
    for step in steps:
        marker = "*" if step.counted else " "
        print(f"{format_deadline_date(step.day, settings.date_format)} {step.weekday} "
              f"{marker} {step.remaining:>4}  {step.note}")
    return 0


def cmd_holidays(args: argparse.Namespace, settings: Settings) -> int:
    """List the holidays of a year."""
    if not MINYEAR <= args.year <= MAXYEAR:
        raise InvalidDateInput(
            message=f"Year {args.year} is outside {MINYEAR}-{MAXYEAR}",
            details={"year": args.year},
        )
    calendar = build_calendar(settings)
    for day, name in calendar.holidays_for_year(args.year):
        print(f"{format_deadline_date(day, settings.date_format)}  {name}")
    return 0


def cmd_macros(args: argparse.Namespace, settings: Settings) -> int:
    """List the supported macro types."""
    for definition in list_macro_types():
        print(f"{definition.macro_type.value:<15} {definition.title}")
        for rule in definition.rules:
            print(f"{'':<15}   {rule.display_term:<16} {rule.label}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scadenzario - calcolo termini processuali",
        prog="scadenzario",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Compute command
    compute_parser = subparsers.add_parser("compute", help="Compute the deadlines of a macro")
    compute_parser.add_argument("macro_type", help="171-ter, 189, 281-duodecies, appeal-long, appeal-short")
    compute_parser.add_argument("date", help="Reference date (YYYY-MM-DD)")
    compute_parser.add_argument(
        "--suspension", action=argparse.BooleanOptionalAction, default=None,
        help="Apply the August suspension period",
    )
    compute_parser.add_argument("--json", action="store_true", help="Print JSON")
    compute_parser.set_defaults(func=cmd_compute)

    # Trace command
    trace_parser = subparsers.add_parser("trace", help="Show every step of a day count")
    trace_parser.add_argument("date", help="Reference date (YYYY-MM-DD)")
    trace_parser.add_argument("days", type=int, help="Calendar days to count")
    trace_parser.add_argument(
        "--suspension", action=argparse.BooleanOptionalAction, default=None,
        help="Apply the August suspension period",
    )
    trace_parser.add_argument("--forward", action="store_true", help="Count forward instead of backward")
    trace_parser.set_defaults(func=cmd_trace)

    # Holidays command
    holidays_parser = subparsers.add_parser("holidays", help="List the holidays of a year")
    holidays_parser.add_argument("year", type=int)
    holidays_parser.set_defaults(func=cmd_holidays)

    # Macros command
    macros_parser = subparsers.add_parser("macros", help="List the supported macro types")
    macros_parser.set_defaults(func=cmd_macros)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    try:
        return args.func(args, settings)
    except ScadenzarioError as e:
        logger.debug("Command %s failed: %s", args.command, e.to_dict())
        print(f"Errore: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
