"""Top-level package for the itinerary prettifier.

Turns itinerary text with compact placeholders (``#JFK``, ``*##EGLL``,
``D(...)``, ``T12(...)``, ``T24(...)``) into readable text, both as a
plain rendering for files and an annotated one for terminals.
"""

from .directory import AirportDirectory
from .domain.models import AirportRecord, FormattedItinerary, RenderMode
from .services import ItineraryFormatterService

__all__ = [
    "AirportDirectory",
    "AirportRecord",
    "FormattedItinerary",
    "ItineraryFormatterService",
    "RenderMode",
]
