"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DirectoryError,
    InputFileError,
    ItineraryError,
    OutputWriteError,
    RecordError,
    ReferenceDataError,
    SchemaError,
)
from .models import (
    AirportRecord,
    FormattedItinerary,
    RenderMode,
    Token,
    TokenKind,
)

__all__ = [
    # Models
    "AirportRecord",
    "FormattedItinerary",
    "RenderMode",
    "Token",
    "TokenKind",
    # Errors
    "ItineraryError",
    "DirectoryError",
    "SchemaError",
    "RecordError",
    "ReferenceDataError",
    "InputFileError",
    "OutputWriteError",
    "ConfigurationError",
]
