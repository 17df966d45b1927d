"""Journal entry model and its stored-string codec - pure, no I/O."""

import json
import math
from dataclasses import dataclass

from moodlog.errors import DecodeError, ValidationError

MOOD_MIN = 0.0
MOOD_MAX = 3.0
DEFAULT_MOOD = 1.5


@dataclass(frozen=True)
class JournalEntry:
    """
    One day's journal entry.

    mood is None only for entries stored without one; every write needs it.
    """

    title: str
    body: str
    mood: float | None

    @property
    def is_empty(self) -> bool:
        return not self.title and not self.body


def encode_entry(entry: JournalEntry) -> str:
    """Serialize an entry to compact JSON with a fixed key order."""
    return json.dumps(
        {"title": entry.title, "body": entry.body, "mood": entry.mood},
        ensure_ascii=False,
        separators=(",", ":"),
    )


def decode_entry(raw: str) -> JournalEntry:
    """
    Parse a stored value back into an entry.

    Accepts the legacy "text" field in place of "body". A missing or null
    mood decodes as None. Raises DecodeError on anything else that is
    malformed or missing; nothing else escapes.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(f"expected an object, got {type(data).__name__}")

    if "body" not in data and "text" in data:
        data["body"] = data["text"]

    missing = [f for f in ("title", "body") if f not in data]
    if missing:
        raise DecodeError(f"missing field(s): {', '.join(missing)}")

    title, body, mood = data["title"], data["body"], data.get("mood")
    if not isinstance(title, str) or not isinstance(body, str):
        raise DecodeError("title and body must be strings")
    if mood is not None and (isinstance(mood, bool) or not isinstance(mood, (int, float))):
        raise DecodeError(f"mood must be a number, got {mood!r}")

    return JournalEntry(title=title, body=body, mood=None if mood is None else float(mood))


def validate_entry(entry: JournalEntry) -> None:
    """Business rules for a write. Raises ValidationError."""
    if entry.is_empty:
        raise ValidationError("Entry needs a title or a body")
    mood = entry.mood
    if mood is None:
        raise ValidationError("Entry needs a mood")
    if isinstance(mood, bool) or not isinstance(mood, (int, float)) or not math.isfinite(mood):
        raise ValidationError(f"Mood must be a number, got {mood!r}")
    if not MOOD_MIN <= mood <= MOOD_MAX:
        raise ValidationError(f"Mood must be between {MOOD_MIN} and {MOOD_MAX}, got {mood}")
