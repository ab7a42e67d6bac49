"""Airport reference data held in memory.

This subpackage builds the code -> airport index used to resolve
placeholder tokens.
"""

from .airport_directory import REQUIRED_COLUMNS, AirportDirectory, column_index

__all__ = ["AirportDirectory", "REQUIRED_COLUMNS", "column_index"]
