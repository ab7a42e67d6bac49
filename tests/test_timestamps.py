"""Tests for strict timestamp parsing and locale-free formatting."""

from datetime import timedelta

import pytest

from itinerary_prettifier.text.timestamps import (
    format_date,
    format_offset,
    format_time_12h,
    format_time_24h,
    parse_timestamp,
)


def test_parse_utc_timestamp():
    parsed = parse_timestamp("2025-03-16T06:30Z")

    assert parsed is not None
    assert (parsed.wall.year, parsed.wall.month, parsed.wall.day) == (2025, 3, 16)
    assert (parsed.wall.hour, parsed.wall.minute) == (6, 30)
    assert parsed.offset == timedelta(0)


def test_parse_offset_timestamp():
    parsed = parse_timestamp("2025-03-15T14:30-04:00")

    assert parsed is not None
    assert parsed.offset == -timedelta(hours=4)
    assert parsed.wall.hour == 14
    assert parsed.wall.tzinfo is None


@pytest.mark.parametrize(
    "raw, offset",
    [
        ("2025-03-15T12:00+24:00", timedelta(hours=24)),
        ("2025-03-15T12:00+05:60", timedelta(hours=6)),
        ("2025-03-15T12:00-24:60", -timedelta(hours=25)),
    ],
)
def test_parse_accepts_offsets_up_to_24_hours_and_60_minutes(raw, offset):
    parsed = parse_timestamp(raw)

    assert parsed is not None
    assert parsed.offset == offset
    assert format_time_24h(parsed) == "12:00"


@pytest.mark.parametrize(
    "raw",
    [
        "2025-03-15T14:30:00Z",  # seconds
        "2025-03-15T14:30:00.000Z",
        "2025-03-15T14:30",  # no zone
        "2025-02-30T10:00Z",  # no such day
        "2025-13-01T10:00Z",
        "2025-03-15T24:00Z",
        "2025-03-15T12:60Z",
        "2025-03-15T12:00+25:00",
        "2025-03-15T12:00+05:61",
        "2025-03-15T12:00Z+01:00",
        "2025-3-15T12:00Z-0",
        "----------------",
    ],
)
def test_parse_rejects_other_shapes(raw):
    assert parse_timestamp(raw) is None


def test_format_date_uses_english_abbreviations():
    assert format_date(parse_timestamp("2025-03-15T14:30-04:00")) == "15 Mar 2025"
    assert format_date(parse_timestamp("2024-12-01T00:00Z")) == "01 Dec 2024"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2025-03-15T14:30-04:00", "02:30PM"),
        ("2025-03-15T00:05Z", "12:05AM"),
        ("2025-03-15T12:00Z", "12:00PM"),
        ("2025-03-15T09:45+01:00", "09:45AM"),
    ],
)
def test_format_time_12h(raw, expected):
    assert format_time_12h(parse_timestamp(raw)) == expected


def test_format_time_24h():
    assert format_time_24h(parse_timestamp("2025-03-16T06:30Z")) == "06:30"
    assert format_time_24h(parse_timestamp("2025-03-16T23:59+09:00")) == "23:59"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2025-03-16T06:30Z", "(+00:00)"),
        ("2025-03-16T06:30+00:00", "(+00:00)"),
        ("2025-03-16T06:30-00:00", "(+00:00)"),
        ("2025-03-16T06:30-04:00", "(-04:00)"),
        ("2025-03-16T06:30+05:30", "(+05:30)"),
        ("2025-03-16T06:30-09:30", "(-09:30)"),
    ],
)
def test_format_offset(raw, expected):
    assert format_offset(parse_timestamp(raw)) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2025-03-15T12:00+24:00", "(+24:00)"),
        ("2025-03-15T12:00+05:60", "(+06:00)"),
        ("2025-03-15T12:00-24:60", "(-25:00)"),
    ],
)
def test_format_offset_carries_minutes_into_hours(raw, expected):
    assert format_offset(parse_timestamp(raw)) == expected
