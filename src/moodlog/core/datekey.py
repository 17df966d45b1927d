"""Canonical YYYY-MM-DD date keys - pure functions, no I/O."""

import re
from datetime import date, datetime, timedelta

_KEY_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def format_key(value: date | datetime) -> str:
    """
    Project a date or datetime onto its local calendar day.

    Aware datetimes are converted to local time first; naive ones are
    taken as already local. Time of day is dropped.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        value = value.date()
    return value.isoformat()


def parse_key(key: str) -> date:
    """Parse a date key back into the calendar day it names."""
    if not is_valid_key(key):
        raise ValueError(f"Not a date key: {key!r}")
    return date.fromisoformat(key)


def is_valid_key(key: object) -> bool:
    """True iff key is exactly YYYY-MM-DD and names a real calendar date."""
    if not isinstance(key, str) or not _KEY_RE.fullmatch(key):
        return False
    try:
        date.fromisoformat(key)
    except ValueError:
        return False
    return True


def today_key(as_of: date | None = None) -> str:
    """Key for the current local day (or as_of)."""
    return format_key(as_of or date.today())


def shift_key(key: str, days: int) -> str:
    """Key for the day `days` away from key (negative = earlier)."""
    return format_key(parse_key(key) + timedelta(days=days))


def is_future(key: str, as_of: date | None = None) -> bool:
    """True if key names a day strictly after as_of (default: today)."""
    as_of = as_of or date.today()
    return parse_key(key) > as_of
