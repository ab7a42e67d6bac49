"""Immutable domain models for the itinerary prettifier.

All models are frozen dataclasses with slots. They have no external
dependencies and describe the reference data, the tokens found in
itinerary text and the formatted result handed back to callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class RenderMode(Enum):
    """Presentation strategy for resolved tokens.

    PLAIN output is safe to persist; ANNOTATED output carries terminal
    style sequences and is meant for display only.
    """

    PLAIN = auto()
    ANNOTATED = auto()


class TokenKind(Enum):
    """Kinds of placeholder recognized in itinerary text."""

    IATA_CODE = auto()
    ICAO_CODE = auto()
    DATE = auto()
    TIME_12H = auto()
    TIME_24H = auto()

    @property
    def is_airport(self) -> bool:
        return self in (TokenKind.IATA_CODE, TokenKind.ICAO_CODE)


@dataclass(frozen=True, slots=True)
class AirportRecord:
    """One row of airport reference data.

    Attributes:
        name: Airport name, never blank
        iso_country: ISO 3166 country code
        municipality: City served by the airport, may be empty
        icao_code: 4-letter ICAO code or empty string
        iata_code: 3-letter IATA code or empty string
        coordinates: Opaque coordinate string as found in the source
    """

    name: str
    iso_country: str = ""
    municipality: str = ""
    icao_code: str = ""
    iata_code: str = ""
    coordinates: str = ""

    def __post_init__(self) -> None:
        """Validate that the record is addressable and named."""
        if not self.name.strip():
            raise ValueError("Airport name must not be empty")
        if not self.icao_code.strip() and not self.iata_code.strip():
            raise ValueError(
                f"Airport {self.name!r} needs an IATA or an ICAO code"
            )

    @property
    def has_municipality(self) -> bool:
        return bool(self.municipality.strip())


@dataclass(frozen=True, slots=True)
class Token:
    """A placeholder matched in the input text.

    Tokens only live for the duration of one scan pass.

    Attributes:
        kind: Which grammar rule produced the match
        literal: The exact matched text, emitted again on a miss
        code: Airport code for IATA/ICAO tokens
        city_flag: True when the token was prefixed with '*'
        raw_timestamp: Inner text of a date/time token
    """

    kind: TokenKind
    literal: str
    code: Optional[str] = None
    city_flag: bool = False
    raw_timestamp: Optional[str] = None


@dataclass(frozen=True, slots=True)
class FormattedItinerary:
    """Both renderings of one itinerary.

    Attributes:
        plain: Undecorated text, safe to write to a file
        annotated: Same text with terminal style sequences
    """

    plain: str
    annotated: str
