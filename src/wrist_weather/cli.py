"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from wrist_weather import __version__
from wrist_weather.config import get_settings
from wrist_weather.datasources import WeatherDataSource
from wrist_weather.renderers.watch_face import (
    build_watch_face,
    render_watch_face_html,
    render_watch_face_text,
)
from wrist_weather.schemas import MeasurementSystem

logger = logging.getLogger(__name__)

UNIT_CHOICES = [m.value for m in MeasurementSystem]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="wrist-weather",
        description="Current, hourly and daily weather for a watch face",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    show_parser = subparsers.add_parser("show", help="Render the watch face")
    show_parser.add_argument(
        "--units",
        choices=UNIT_CHOICES,
        default=None,
        help="Measurement system (default: measurement_system from settings)",
    )
    show_parser.add_argument(
        "--format",
        choices=["text", "html"],
        default="text",
        help="Output format (default: text)",
    )
    show_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write to this file instead of stdout",
    )

    readings_parser = subparsers.add_parser("readings", help="Print every reading as JSON lines")
    readings_parser.add_argument(
        "--units",
        choices=UNIT_CHOICES,
        default=None,
        help="Measurement system (default: measurement_system from settings)",
    )

    return parser


def configure_logging(debug: bool) -> None:
    """Send log records to stderr; DEBUG when asked, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _measurement_system(args: argparse.Namespace) -> MeasurementSystem:
    if args.units is not None:
        return MeasurementSystem.parse(args.units)
    return get_settings().measurement_system


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Units: {settings.measurement_system.value}")
    print(f"Debug: {settings.debug}")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the 'show' command: render the watch face."""
    settings = get_settings()
    source = WeatherDataSource(_measurement_system(args))
    face = build_watch_face(source, settings.label_format())

    if args.format == "html":
        output = render_watch_face_html(face)
    else:
        output = render_watch_face_text(face)

    if args.output is None:
        print(output, end="")
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(output, encoding="utf-8")
    logger.info("Wrote %s watch face to %s", args.format, args.output)
    print(f"Wrote {args.output}")
    return 0


def cmd_readings(args: argparse.Namespace) -> int:
    """Handle the 'readings' command: one JSON object per reading."""
    settings = get_settings()
    fmt = settings.label_format()
    source = WeatherDataSource(_measurement_system(args))

    readings = [source.current_weather, *source.short_term_weather, *source.long_term_weather]
    for reading in readings:
        print(json.dumps(reading.to_display_dict(fmt), ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "show": cmd_show,
        "readings": cmd_readings,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        configure_logging(args.debug or get_settings().debug)
        return handler(args)
    except ValidationError as e:
        print(f"Error: invalid settings\n{e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
