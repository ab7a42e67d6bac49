"""Directory adapters - Implementations of AirportRepositoryPort.

Available implementations:
- CSVAirportRepository: Loads the airport directory from a CSV file
"""

from .csv_repository import CSVAirportRepository

__all__ = ["CSVAirportRepository"]
