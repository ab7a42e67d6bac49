"""Strict timestamp parsing and formatting for date/time tokens.

Two input shapes are accepted:

- ``YYYY-MM-DDTHH:MMZ`` (UTC)
- ``YYYY-MM-DDTHH:MM±HH:MM``

Anything else (seconds, fractions, single-digit fields, impossible
dates) is rejected so the caller can pass the token through unchanged.
Output formatting never consults the process locale.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

_SHAPE = re.compile(
    r"([0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2})"
    r"(?:(Z)|([+-])([0-9]{2}):([0-9]{2}))"
)
_CLOCK_FORMAT = "%Y-%m-%dT%H:%M"

# Offset fields are range-checked loosely: up to 24 hours and 60 minutes.
MAX_OFFSET_HOURS = 24
MAX_OFFSET_MINUTES = 60

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


@dataclass(frozen=True, slots=True)
class Timestamp:
    """Wall-clock time as written in the token, plus its UTC offset.

    The offset can exceed what datetime.timezone accepts, so it is kept
    beside the naive wall time instead of inside it.

    Attributes:
        wall: Naive date and time of day
        offset: Signed distance from UTC
    """

    wall: datetime
    offset: timedelta


def parse_timestamp(raw: str) -> Optional[Timestamp]:
    """Parse the inner text of a date/time token.

    Returns:
        The parsed Timestamp, or None if the text matches neither format.
    """
    match = _SHAPE.fullmatch(raw)
    if match is None:
        return None

    clock, utc, sign, hours, minutes = match.groups()
    if utc:
        offset = timedelta(0)
    else:
        if int(hours) > MAX_OFFSET_HOURS or int(minutes) > MAX_OFFSET_MINUTES:
            return None
        offset = timedelta(hours=int(hours), minutes=int(minutes))
        if sign == "-":
            offset = -offset

    try:
        wall = datetime.strptime(clock, _CLOCK_FORMAT)
    except ValueError:
        return None
    return Timestamp(wall=wall, offset=offset)


def format_date(timestamp: Timestamp) -> str:
    """'15 Mar 2025'"""
    wall = timestamp.wall
    return f"{wall.day:02d} {MONTH_ABBREVIATIONS[wall.month - 1]} {wall.year:04d}"


def format_time_12h(timestamp: Timestamp) -> str:
    """'02:30PM'"""
    wall = timestamp.wall
    hour = wall.hour % 12 or 12
    suffix = "AM" if wall.hour < 12 else "PM"
    return f"{hour:02d}:{wall.minute:02d}{suffix}"


def format_time_24h(timestamp: Timestamp) -> str:
    """'14:30'"""
    return f"{timestamp.wall.hour:02d}:{timestamp.wall.minute:02d}"


def format_offset(timestamp: Timestamp) -> str:
    """UTC offset in parentheses; UTC and -00:00 both give '(+00:00)'.

    Minutes carry into hours, so '+05:60' is written '(+06:00)'.
    """
    total_minutes = int(timestamp.offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"({sign}{hours:02d}:{minutes:02d})"
