"""Shared fixtures for the itinerary prettifier tests."""

from __future__ import annotations

import re

import pytest

from itinerary_prettifier.config import reset_config
from itinerary_prettifier.directory import AirportDirectory

HEADER = ["name", "iso_country", "municipality", "icao_code", "iata_code", "coordinates"]

ROWS = [
    ["John F Kennedy International Airport", "US", "New York", "KJFK", "JFK", "-73.77, 40.63"],
    ["Charles de Gaulle Airport", "FR", "Paris", "LFPG", "CDG", "2.55, 49.01"],
    ["Mystery Field", "XX", "", "ZZZZ", "", "0, 0"],
]

ANSI_SEQUENCE = re.compile(r"\x1b\[[0-9;]*m")


def strip_styles(text: str) -> str:
    return ANSI_SEQUENCE.sub("", text)


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def directory() -> AirportDirectory:
    return AirportDirectory.build(ROWS, HEADER)


@pytest.fixture
def lookup_csv(tmp_path):
    path = tmp_path / "airport-lookup.csv"
    lines = [",".join(HEADER)]
    lines += [",".join(f'"{field}"' for field in row) for row in ROWS]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
