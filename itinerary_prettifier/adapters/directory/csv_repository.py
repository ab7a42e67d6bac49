"""CSV airport repository adapter.

This adapter reads the airport lookup file and builds the in-memory
directory from it, adding:
- Configuration injection (path and encoding from config)
- Caching of the built directory
- Error wrapping with the offending file path
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ...config import DirectoryConfig, get_config
from ...directory import REQUIRED_COLUMNS, AirportDirectory
from ...domain.errors import DirectoryError, ReferenceDataError, SchemaError


@dataclass
class CSVAirportRepository:
    """Airport repository that loads from a CSV file.

    This adapter implements AirportRepositoryPort.

    Attributes:
        config: Directory configuration (data dir, file name, encoding)
        path: Explicit file path, overrides the configured lookup path
    """

    config: DirectoryConfig = field(default_factory=lambda: get_config().directory)
    path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    _directory: Optional[AirportDirectory] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.path is not None:
            self.path = Path(self.path)

    @property
    def source_path(self) -> Path:
        return self.path if self.path is not None else self.config.lookup_path

    def load(self) -> AirportDirectory:
        """Load the airport directory from the CSV file.

        Returns:
            The built directory (cached after the first call).

        Raises:
            ReferenceDataError: If the file cannot be read or parsed as CSV.
            SchemaError: If the header misses a required column.
            RecordError: If a data row is malformed.
        """
        if self._directory is not None:
            return self._directory

        source = self.source_path
        self._logger.debug("Loading airport directory", extra={"path": str(source)})

        try:
            directory = self._load_directory_from_csv(source)
        except DirectoryError as e:
            e.file_path = str(source)
            raise
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise ReferenceDataError(
                f"Failed to read airport lookup file {source}",
                file_path=str(source),
                cause=e,
            )

        self._directory = directory
        self._logger.info("Airport directory loaded", extra={"codes": len(directory)})
        return directory

    def _load_directory_from_csv(self, source: Path) -> AirportDirectory:
        with source.open(newline="", encoding=self.config.encoding) as f:
            reader = csv.reader(f)
            header = next(reader, None)
            if header is None:
                raise SchemaError(
                    "airport lookup file is empty",
                    missing_columns=REQUIRED_COLUMNS,
                )
            return AirportDirectory.build(reader, header)

    def clear_cache(self) -> None:
        """Forget the cached directory."""
        self._directory = None
        self._logger.debug("Airport directory cache cleared")
