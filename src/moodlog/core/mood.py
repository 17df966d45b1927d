"""Mood classification and series logic - pure functions, no I/O."""

import math
from enum import Enum
from datetime import date

from .datekey import parse_key
from .entry import MOOD_MAX, MOOD_MIN, JournalEntry


class Mood(Enum):
    """Mood class shown next to an entry or a chart point."""

    SAD = "sad"
    NEUTRAL = "neutral"
    HAPPY = "happy"

    @property
    def emoji(self) -> str:
        return _EMOJI[self]


_EMOJI = {
    Mood.SAD: "☹️",
    Mood.NEUTRAL: "😐",
    Mood.HAPPY: "😊",
}


def classify(mood: float) -> Mood:
    """
    Classify a mood score.

    [0, 1) -> SAD, [1, 2) -> NEUTRAL, [2, 3] -> HAPPY.
    """
    if mood < 1.0:
        return Mood.SAD
    elif mood < 2.0:
        return Mood.NEUTRAL
    else:
        return Mood.HAPPY


def is_valid_mood(mood: object) -> bool:
    """True for a finite real number inside the mood scale."""
    if isinstance(mood, bool) or not isinstance(mood, (int, float)):
        return False
    return math.isfinite(mood) and MOOD_MIN <= mood <= MOOD_MAX


def build_series(entries: list[tuple[str, JournalEntry]]) -> list[tuple[date, float]]:
    """
    Turn keyed entries into (date, mood) points, oldest first.

    Entries with an absent or unusable mood are dropped.
    Pure function - no I/O.
    """
    points = [
        (parse_key(key), float(entry.mood))
        for key, entry in entries
        if is_valid_mood(entry.mood)
    ]
    return sorted(points, key=lambda p: p[0])


def count_buckets(series: list[tuple[date, float]]) -> dict[Mood, int]:
    """Count points per mood class; every class is present."""
    counts = {m: 0 for m in Mood}
    for _, mood in series:
        counts[classify(mood)] += 1
    return counts


def average_mood(series: list[tuple[date, float]]) -> float | None:
    """Mean mood of the series, or None if it is empty."""
    if not series:
        return None
    return sum(mood for _, mood in series) / len(series)
