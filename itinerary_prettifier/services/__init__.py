"""Services layer - Application orchestration.

Available services:
- ItineraryFormatterService: token substitution and whitespace cleanup
  for both rendering modes
"""

from .formatter import ItineraryFormatterService

__all__ = ["ItineraryFormatterService"]
