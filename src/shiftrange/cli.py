"""Command-line interface for the shiftrange shift picker."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from shiftrange.config import load_options
from shiftrange.domain.errors import InvalidShiftError, ShiftRangeError
from shiftrange.domain.models import PanelOptions, ShiftDefinition
from shiftrange.domain.timezones import BUSINESS_TIMEZONES
from shiftrange.output.pdf_generator import PDFGenerator
from shiftrange.output.text_generator import TextGenerator
from shiftrange.resolver.time_logic import ShiftIntervalResolver
from shiftrange.validation.validator import OptionsValidator

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _load(config_path: Optional[str], timezone: Optional[str]) -> PanelOptions:
    """Load options (or defaults) and apply the timezone override."""
    options = load_options(config_path) if config_path else PanelOptions()
    if timezone:
        options.timezone = timezone
    return options


def _pick_shift(options: PanelOptions, args: argparse.Namespace) -> ShiftDefinition:
    if args.start or args.end:
        return ShiftDefinition(
            name=args.shift or "Custom",
            start=args.start or "",
            end=args.end or "",
            date_offset=args.offset,
        )
    if not args.shift:
        raise InvalidShiftError("Give --shift NAME (with --config) or --start and --end")
    shift = options.find_shift(args.shift)
    if shift is None:
        known = ", ".join(s.name for s in options.shifts) or "none configured"
        raise InvalidShiftError(f"Unknown shift '{args.shift}' (known: {known})")
    return shift


def run_resolve(
    args: argparse.Namespace,
    resolver: Optional[ShiftIntervalResolver] = None,
) -> int:
    """Resolve one shift and print its time range."""
    resolver = resolver or ShiftIntervalResolver()
    options = _load(args.config, args.timezone)
    shift = _pick_shift(options, args)
    selected_date = args.date or options.selected_date

    interval = resolver.resolve(shift, options.timezone, selected_date)

    if args.json:
        print(json.dumps(interval.as_dict()))
        return 0

    local_from, local_to = interval.local_bounds(options.timezone)
    utc_from, utc_to = interval.utc_bounds()
    print(f"Shift:    {shift.label}")
    print(f"Timezone: {options.timezone}")
    print(f"From:     {local_from.strftime('%Y-%m-%d %H:%M')}  "
          f"({utc_from.isoformat()})  {interval.from_ms}")
    print(f"To:       {local_to.strftime('%Y-%m-%d %H:%M')}  "
          f"({utc_to.isoformat()})  {interval.to_ms}")
    print(f"Duration: {interval.duration_minutes // 60}h {interval.duration_minutes % 60:02d}m")
    return 0


def run_board(
    args: argparse.Namespace,
    resolver: Optional[ShiftIntervalResolver] = None,
) -> int:
    """Print the shift board, or write it to a text or PDF file."""
    options = _load(args.config, args.timezone)

    if args.output and Path(args.output).suffix.lower() == ".pdf":
        PDFGenerator(resolver=resolver).generate(options, args.output, args.date)
        print(f"Shift board written to {args.output}")
        return 0

    generator = TextGenerator(resolver=resolver)
    if args.output:
        generator.generate(options, args.output, args.date)
        print(f"Shift board written to {args.output}")
    else:
        print(generator.generate_to_string(options, args.date))
    return 0


def run_active(
    args: argparse.Namespace,
    resolver: Optional[ShiftIntervalResolver] = None,
) -> int:
    """Print the names of the shifts active right now."""
    resolver = resolver or ShiftIntervalResolver()
    options = _load(args.config, args.timezone)
    selected_date = args.date or options.selected_date

    active = resolver.active_shifts(options.shifts, options.timezone, selected_date)
    if not active:
        print("No active shift")
        return 0
    for shift in active:
        print(shift.label)
    return 0


def run_validate(
    args: argparse.Namespace,
    resolver: Optional[ShiftIntervalResolver] = None,
) -> int:
    """Validate an options file; exit status 1 when it has errors."""
    options = _load(args.config, args.timezone)
    result = OptionsValidator(resolver=resolver).validate(options)

    for warning in result.warnings:
        print(f"  Warning: {warning}")

    if result.is_valid:
        print(f"Validation: PASSED ({len(options.shifts)} shifts)")
        return 0

    print(f"Validation: FAILED ({len(result.errors)} errors)")
    for error in result.errors:
        print(f"    - {error}")
    return 1


def run_timezones(args: argparse.Namespace) -> int:
    """List the business timezones offered by the options editor."""
    for zone, label in BUSINESS_TIMEZONES:
        print(f"{zone:<24} {label}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shiftrange",
        description="shiftrange - Resolve work shifts into dashboard time ranges",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s resolve --start 22:00 --end 06:00 --date 2025-01-15
  %(prog)s resolve -c shifts.json --shift Night --json
  %(prog)s board -c shifts.json --date 2025-01-15
  %(prog)s board -c shifts.json --output board.pdf
  %(prog)s active -c shifts.json
  %(prog)s validate -c shifts.json
  %(prog)s timezones
        """,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_common(sub: argparse.ArgumentParser, config_required: bool) -> None:
        sub.add_argument(
            "--config", "-c",
            type=str,
            required=config_required,
            help="Panel options JSON file",
        )
        sub.add_argument(
            "--timezone", "-z",
            type=str,
            help="Business timezone (overrides the options file)",
        )
        sub.add_argument(
            "--date", "-d",
            type=str,
            help="Date to resolve shifts on, YYYY-MM-DD (default: today)",
        )

    resolve_parser = subparsers.add_parser("resolve", help="Resolve one shift to a time range")
    add_common(resolve_parser, config_required=False)
    resolve_parser.add_argument("--shift", "-s", type=str, help="Shift name from the options file")
    resolve_parser.add_argument("--start", type=str, help="Inline shift start (HH:mm)")
    resolve_parser.add_argument("--end", type=str, help="Inline shift end (HH:mm)")
    resolve_parser.add_argument(
        "--offset",
        type=int,
        default=0,
        help="Inline shift date offset in days (default: 0)",
    )
    resolve_parser.add_argument(
        "--json",
        action="store_true",
        help='Print {"from": ..., "to": ...} in epoch milliseconds',
    )

    board_parser = subparsers.add_parser("board", help="Show all shifts for a date")
    add_common(board_parser, config_required=True)
    board_parser.add_argument(
        "--output", "-o",
        type=str,
        help="Output file (.pdf for PDF, anything else for text)",
    )

    active_parser = subparsers.add_parser("active", help="List shifts active right now")
    add_common(active_parser, config_required=True)

    validate_parser = subparsers.add_parser("validate", help="Validate an options file")
    add_common(validate_parser, config_required=True)

    subparsers.add_parser("timezones", help="List business timezones")

    return parser


COMMANDS = {
    "resolve": run_resolve,
    "board": run_board,
    "active": run_active,
    "validate": run_validate,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "timezones":
        return run_timezones(args)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except ShiftRangeError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
