"""File-level orchestration for the itinerary prettifier.

The pipeline is organized in several stages:

1. Input checks (itinerary and lookup files must exist) and reading.
2. Directory loading (from the CSV lookup file).
3. Formatting (plain and annotated renderings).
4. Output (plain rendering written verbatim to the destination).

Each step delegates work to dedicated, testable modules.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .adapters.directory import CSVAirportRepository
from .config import AppConfig, get_config
from .domain.errors import InputFileError, OutputWriteError
from .domain.models import FormattedItinerary
from .ports.directory import AirportRepositoryPort
from .services import ItineraryFormatterService

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def prettify_text(
    text: str,
    lookup_path: Optional[PathLike] = None,
    config: Optional[AppConfig] = None,
) -> FormattedItinerary:
    """Format in-memory text against the airport lookup file.

    Without lookup_path the configured directory lookup path is used.
    """
    config = config or get_config()
    repository: AirportRepositoryPort = CSVAirportRepository(
        config.directory, Path(lookup_path) if lookup_path is not None else None
    )
    directory = repository.load()
    service = ItineraryFormatterService.with_styles(directory, config.rendering)
    return service.format(text)


def prettify_file(
    input_path: PathLike,
    output_path: PathLike,
    lookup_path: Optional[PathLike] = None,
    config: Optional[AppConfig] = None,
) -> FormattedItinerary:
    """Run the full file-to-file pipeline.

    Without lookup_path the configured directory lookup path is used.

    Returns:
        Both renderings; the plain one has already been written to
        output_path.

    Raises:
        InputFileError: If the input or lookup file does not exist.
        DirectoryError: If the lookup file is unreadable or malformed.
        OutputWriteError: If the output file cannot be written.
    """
    config = config or get_config()
    input_path, output_path = Path(input_path), Path(output_path)
    lookup_path = (
        Path(lookup_path) if lookup_path is not None else config.directory.lookup_path
    )

    if not input_path.exists():
        raise InputFileError("Input file not found", path=str(input_path))
    if not lookup_path.exists():
        raise InputFileError(
            "Airport lookup file not found", path=str(lookup_path)
        )

    try:
        with input_path.open(encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(
            "Error reading input file", path=str(input_path), cause=e
        )

    result = prettify_text(text, lookup_path, config)

    try:
        with output_path.open("w", encoding="utf-8", newline="") as f:
            f.write(result.plain)
    except OSError as e:
        raise OutputWriteError(
            "Error writing output file", path=str(output_path), cause=e
        )

    logger.info("Itinerary written", extra={"output": str(output_path)})
    return result
