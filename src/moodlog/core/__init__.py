"""Functional core - pure business logic with no I/O."""

from .datekey import format_key, parse_key, is_valid_key, today_key, shift_key, is_future
from .entry import (
    JournalEntry,
    encode_entry,
    decode_entry,
    validate_entry,
    MOOD_MIN,
    MOOD_MAX,
    DEFAULT_MOOD,
)
from .mood import Mood, classify, is_valid_mood, build_series, count_buckets, average_mood

__all__ = [
    # Date keys
    "format_key",
    "parse_key",
    "is_valid_key",
    "today_key",
    "shift_key",
    "is_future",
    # Entries
    "JournalEntry",
    "encode_entry",
    "decode_entry",
    "validate_entry",
    "MOOD_MIN",
    "MOOD_MAX",
    "DEFAULT_MOOD",
    # Mood
    "Mood",
    "classify",
    "is_valid_mood",
    "build_series",
    "count_buckets",
    "average_mood",
]
