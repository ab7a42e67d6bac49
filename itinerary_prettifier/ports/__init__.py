"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .directory import AirportLookupPort, AirportRepositoryPort
from .rendering import SpanRendererPort

__all__ = [
    # Directory
    "AirportLookupPort",
    "AirportRepositoryPort",
    # Rendering
    "SpanRendererPort",
]
