#!/usr/bin/env python3
"""
Command-line entry point for the capo finder.

    capo-finder F Bb C
    capo-finder --format yaml Db F
"""

from __future__ import annotations

import argparse
import json
import logging

import yaml

from capo_finder.constants import OUTPUT_FORMATS, OutputFormat
from capo_finder.core import InvalidChordName, parse_progression
from capo_finder.models import CapoResult
from capo_finder.search import find_capo_position

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False, default_level: int = logging.WARNING) -> None:
    """Send log records to stderr, at DEBUG when requested."""
    logging.basicConfig(level=default_level)
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="capo-finder",
        description="Find the lowest capo fret that avoids barre chords",
    )
    parser.add_argument(
        "chords",
        nargs="*",
        metavar="CHORD",
        help="Chord roots in playing order (e.g. C, F#, Bb)",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def render(result: CapoResult, output_format: OutputFormat = "text") -> str:
    """Render a result in one of the supported output formats."""
    if output_format == "json":
        return json.dumps(result.to_yaml_dict(), indent=2)
    if output_format == "yaml":
        return yaml.safe_dump(result.to_yaml_dict(), default_flow_style=False, sort_keys=False)
    return result.describe()


def main(argv: list[str] | None = None) -> int:
    """Parse chords, search for a capo position and print the outcome."""
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    configure_logging(args.debug)

    try:
        progression = parse_progression(args.chords)
    except InvalidChordName as e:
        parser.error(str(e))

    result = find_capo_position(progression)
    logger.debug(f"Search result: {result.status.value}, fret {result.fret}")

    print(render(result, args.format).rstrip("\n"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
