"""Typed domain errors for the itinerary prettifier.

Reference-data problems are fatal to directory construction and surface
as DirectoryError subclasses. Token resolution never raises: unknown
codes and unparsable timestamps pass through unchanged.

All errors inherit from ItineraryError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class ItineraryError(Exception):
    """Base error for the itinerary prettifier.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DirectoryError(ItineraryError):
    """Airport reference data could not be turned into a directory.

    Attributes:
        file_path: Path to the reference file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class SchemaError(DirectoryError):
    """Reference-data header is missing required columns.

    Attributes:
        missing_columns: Logical column names absent from the header
    """

    missing_columns: Tuple[str, ...] = ()


@dataclass
class RecordError(DirectoryError):
    """A reference-data row is malformed.

    Attributes:
        row_number: 1-based index of the offending data row
        reason: Short description of what is wrong with the row
    """

    row_number: int = 0
    reason: str = ""


@dataclass
class ReferenceDataError(DirectoryError):
    """Reference file exists but cannot be read."""


@dataclass
class InputFileError(ItineraryError):
    """An input file handed to the pipeline is missing or unreadable.

    Attributes:
        path: The offending path
    """

    path: str = ""


@dataclass
class OutputWriteError(ItineraryError):
    """The plain output could not be written.

    Attributes:
        path: Destination path
    """

    path: str = ""


@dataclass
class ConfigurationError(ItineraryError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
