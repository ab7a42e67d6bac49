"""Directory ports - Abstractions for airport lookup and loading.

These protocols define the contracts between the token rewriter and
the airport reference data, and between the caller layer and whatever
storage the reference data comes from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..directory import AirportDirectory
    from ..domain.models import AirportRecord


class AirportLookupPort(Protocol):
    """Port for resolving airport codes.

    Implementation: directory/airport_directory.py (AirportDirectory)

    Lookups are exact and case-sensitive. A miss returns None and is
    never an error.
    """

    def lookup(self, code: str) -> Optional[AirportRecord]:
        """Resolve an IATA or ICAO code.

        Args:
            code: The code as it appears in the token (e.g. 'JFK', 'KJFK').

        Returns:
            The matching record, or None if the code is unknown.
        """
        ...


class AirportRepositoryPort(Protocol):
    """Port for loading the airport directory from storage.

    Implementation: adapters/directory/csv_repository.py
    """

    def load(self) -> AirportDirectory:
        """Load the airport directory.

        Returns:
            A fully built, read-only directory.

        Raises:
            DirectoryError: If the reference data is unreadable or invalid.
        """
        ...
