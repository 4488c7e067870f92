#!/usr/bin/env python3
"""stringify-interval CLI - print a number of seconds as readable text."""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from dateutil.parser import isoparse
from pydantic import ValidationError

from .api import with_date, with_now, without_date
from .config.settings import ConfigurationError, Settings, load_settings
from .exceptions import StringifyError
from .utils.logging import get_logger, operation_context, setup_logging


def parse_date(value: str) -> datetime:
    """Parse an ISO 8601 date for argparse."""
    try:
        return isoparse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid ISO 8601 date: {value!r}") from e


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="stringify-interval",
        description="Print an interval in seconds as human-readable text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s 500
  %(prog)s 50000000 --date 1950-01-01
  %(prog)s -50000000 --date 1950-01-01T00:00:00Z
  %(prog)s 3725 --no-calendar --joiner ":" --no-final-joiner
        """,
    )

    parser.add_argument(
        "interval",
        type=int,
        help="Interval in seconds; negative intervals count back from the date",
    )

    # Anchor date options
    anchor_group = parser.add_mutually_exclusive_group()
    anchor_group.add_argument(
        "--date",
        type=parse_date,
        help="ISO 8601 date that years and months are measured from",
    )
    anchor_group.add_argument(
        "--now",
        action="store_true",
        help="Measure years and months from the current time (default)",
    )
    parser.add_argument(
        "--no-calendar",
        action="store_true",
        help="Do not show years or months",
    )

    # Text options
    parser.add_argument("--joiner", help="Separator between units (default: ', ')")
    final_joiner_group = parser.add_mutually_exclusive_group()
    final_joiner_group.add_argument(
        "--final-joiner",
        help="Separator between the last two units (default: ' and ')",
    )
    final_joiner_group.add_argument(
        "--no-final-joiner",
        action="store_true",
        help="Use the regular joiner between the last two units",
    )
    parser.add_argument(
        "--spacer", help="Separator between a count and its label (default: ' ')"
    )

    # Logging options
    parser.add_argument(
        "--log-level",
        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Format log records as JSON",
    )

    # Configuration options
    parser.add_argument(
        "--config",
        type=Path,
        help="Configuration file path",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit",
    )

    return parser


def merge_settings_with_args(args: argparse.Namespace, settings: Settings) -> Settings:
    """Merge command line arguments with settings."""
    updates = {}

    if args.no_calendar:
        updates["calendar_units"] = False
        if settings.units is not None:
            updates["units"] = {
                name: unit_settings
                for name, unit_settings in settings.units.items()
                if name not in ("years", "months")
            }

    if args.joiner is not None:
        updates["joiner"] = args.joiner
    if args.final_joiner is not None:
        updates["final_joiner"] = args.final_joiner
    if args.no_final_joiner:
        updates["final_joiner"] = None
    if args.spacer is not None:
        updates["spacer"] = args.spacer

    if args.log_level:
        updates["log_level"] = args.log_level
    if args.log_file:
        updates["log_file"] = args.log_file
    if args.json_logs:
        updates["json_logs"] = True

    current_dict = settings.model_dump()
    current_dict.update(updates)

    return Settings(**current_dict)


def setup_application_logging(settings: Settings) -> None:
    """Set up application logging based on settings."""
    setup_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        json_format=settings.json_logs,
    )


def stringify_with_settings(
    interval: int, settings: Settings, date: Optional[datetime] = None
) -> str:
    """Stringify an interval using the configuration in settings.

    Without a date, years and months are measured from the current time.
    """
    config = settings.build_display_config()
    text = settings.build_text()

    if not config.has_calendar_units:
        return without_date(interval, config.to_fixed_config(), text)
    if date is not None:
        return with_date(interval, date, config, text)
    return with_now(interval, config, text)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the stringify-interval CLI."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        settings = merge_settings_with_args(args, load_settings(args.config))
    except (ConfigurationError, ValidationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_application_logging(settings)
    logger = get_logger(__name__)

    if args.show_config:
        print(json.dumps(settings.to_dict(), indent=2))
        return 0

    try:
        with operation_context("stringify", interval=args.interval):
            logger.debug(f"Stringifying {args.interval}s")
            output = stringify_with_settings(args.interval, settings, args.date)

        print(output)
        return 0

    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130

    except StringifyError as e:
        logger.debug(f"Stringify failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
