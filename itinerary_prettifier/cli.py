"""Command-line entry point.

    itinerary-prettifier ./input.txt ./output.txt ./airport-lookup.csv

The lookup file may be omitted; the configured data directory and lookup
file name are used instead.

Writes the plain rendering to the output file and prints the annotated
rendering to the terminal.
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from .config import AppConfig, configure_logging, get_config
from .domain.errors import DirectoryError, InputFileError, ItineraryError
from .pipeline import prettify_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="itinerary-prettifier",
        description=(
            "Replace airport codes and date/time placeholders in an itinerary "
            "with readable text."
        ),
    )
    parser.add_argument("input", help="itinerary text containing placeholders")
    parser.add_argument("output", help="where to write the plain result")
    parser.add_argument(
        "airport_lookup",
        nargs="?",
        default=None,
        help="airport lookup CSV file (default: ITIN_DIRECTORY_DATA_DIR/ITIN_DIRECTORY_LOOKUP_FILE)",
    )
    return parser


def print_error(console: Console, message: str) -> None:
    console.print(f"[bold red]Error: {escape(message)}[/]")


def print_success(console: Console, message: str) -> None:
    console.print(f"[bold green]Success: {escape(message)}[/]")


def _describe(error: ItineraryError) -> str:
    if isinstance(error, InputFileError):
        return error.message
    if isinstance(error, DirectoryError):
        return f"Airport lookup file is malformed: {error}"
    return str(error)


def main(
    argv: Optional[Sequence[str]] = None,
    console: Optional[Console] = None,
    config: Optional[AppConfig] = None,
) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    config = config or get_config()
    configure_logging(config.observability)

    try:
        result = prettify_file(args.input, args.output, args.airport_lookup, config)
    except ItineraryError as e:
        print_error(console, _describe(e))
        return 1

    print_success(console, "Processing completed successfully!")
    console.print()
    console.print("[bold blue]=== Processed Output ===[/]")
    console.print()
    console.print(Text.from_ansi(result.annotated), soft_wrap=True)
    return 0
