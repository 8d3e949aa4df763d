"""Canonical ``YYYY-MM-DD`` day keys and the supported date range."""

from __future__ import annotations

import re
from datetime import date, datetime

MIN_DATE = date(1970, 1, 1)
MAX_DATE = date(2200, 1, 1)

# Bounds handed to the date-entry field of the add-event dialog
DATE_FIELD_MIN = "1970-01-01"
DATE_FIELD_MAX = "2200-01-01"

_KEY_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


class InvalidKeyError(ValueError):
    """Raised when a string is not a valid ``YYYY-MM-DD`` day key."""


def key_for(year: int, month: int, day: int) -> str:
    """Format year/month/day as a key without checking the day exists."""
    return f"{year:04d}-{month:02d}-{day:02d}"


def encode(value: date | datetime) -> str:
    """Return the key of the local calendar day *value* falls on.

    Aware datetimes are converted to local time first; the time of day is
    dropped.
    """
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone()
    return key_for(value.year, value.month, value.day)


def decode(key: str) -> datetime:
    """Parse *key* into a naive datetime at local midnight of that day."""
    if not isinstance(key, str):
        raise InvalidKeyError(f"day key must be a string, got {type(key).__name__}")
    m = _KEY_RE.fullmatch(key)
    if m is None:
        raise InvalidKeyError(f"not a YYYY-MM-DD key: {key!r}")
    year, month, day = (int(g) for g in m.groups())
    try:
        return datetime(year, month, day)
    except ValueError as exc:
        raise InvalidKeyError(f"no such day: {key!r}") from exc


def clamp_to_field(key: str) -> str:
    """Clamp a valid key to the date field's min/max, as the field itself does.

    Keys sort in date order, so plain string comparison is enough.
    """
    decode(key)
    return min(max(key, DATE_FIELD_MIN), DATE_FIELD_MAX)


def is_in_range(value: date | datetime) -> bool:
    """True if the calendar day of *value* lies within MIN_DATE..MAX_DATE."""
    if isinstance(value, datetime):
        value = value.date()
    return MIN_DATE <= value <= MAX_DATE
