"""Airport directory built from tabular reference data.

The directory maps both IATA and ICAO codes to a single shared
AirportRecord. It is built once from a header row plus data rows and is
read-only afterwards.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Sequence

from ..domain.errors import RecordError, SchemaError
from ..domain.models import AirportRecord

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = (
    "name",
    "iso_country",
    "municipality",
    "icao_code",
    "iata_code",
    "coordinates",
)


class AirportDirectory:
    """Read-only code -> AirportRecord index.

    Use AirportDirectory.build() to construct one from reference rows.
    """

    __slots__ = ("_by_code",)

    def __init__(self, by_code: Mapping[str, AirportRecord]) -> None:
        self._by_code: Mapping[str, AirportRecord] = MappingProxyType(dict(by_code))

    @classmethod
    def build(
        cls,
        rows: Iterable[Sequence[str]],
        header: Sequence[str],
    ) -> AirportDirectory:
        """Build a directory from a header row and data rows.

        Args:
            rows: Data rows, each a sequence of string fields.
            header: Column names; matched case-insensitively after trimming.

        Returns:
            The populated directory.

        Raises:
            SchemaError: If a required column is missing from the header.
            RecordError: On the first malformed data row.
        """
        columns = column_index(header)
        by_code: Dict[str, AirportRecord] = {}

        for row_number, row in enumerate(rows, start=1):
            if len(row) == 0:
                continue
            record = _record_from_row(row, columns, len(header), row_number)
            if record.iata_code != "":
                by_code[record.iata_code] = record
            if record.icao_code != "":
                by_code[record.icao_code] = record

        logger.debug("Airport directory built", extra={"codes": len(by_code)})
        return cls(by_code)

    def lookup(self, code: str) -> Optional[AirportRecord]:
        """Exact, case-sensitive lookup. Returns None on a miss."""
        return self._by_code.get(code)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __len__(self) -> int:
        return len(self._by_code)

    def __repr__(self) -> str:
        return f"AirportDirectory(codes={len(self._by_code)})"


def column_index(header: Sequence[str]) -> Dict[str, int]:
    """Map normalized column names to their position in the header.

    Raises:
        SchemaError: If any required column is absent.
    """
    columns: Dict[str, int] = {}
    for position, column in enumerate(header):
        columns[column.strip().lower()] = position

    missing = tuple(name for name in REQUIRED_COLUMNS if name not in columns)
    if missing:
        raise SchemaError(
            f"missing required column: {', '.join(missing)}",
            missing_columns=missing,
        )
    return columns


def _record_from_row(
    row: Sequence[str],
    columns: Mapping[str, int],
    width: int,
    row_number: int,
) -> AirportRecord:
    if len(row) != width:
        raise RecordError(
            f"malformed record on row {row_number}",
            row_number=row_number,
            reason=f"expected {width} fields, got {len(row)}",
        )

    name = row[columns["name"]]
    iata_code = row[columns["iata_code"]]
    icao_code = row[columns["icao_code"]]

    if not name.strip():
        raise RecordError(
            f"empty name in record on row {row_number}",
            row_number=row_number,
            reason="empty name",
        )
    if not iata_code.strip() and not icao_code.strip():
        raise RecordError(
            f"record on row {row_number} has no IATA or ICAO code",
            row_number=row_number,
            reason="no code",
        )

    return AirportRecord(
        name=name,
        iso_country=row[columns["iso_country"]],
        municipality=row[columns["municipality"]],
        icao_code=icao_code,
        iata_code=iata_code,
        coordinates=row[columns["coordinates"]],
    )
