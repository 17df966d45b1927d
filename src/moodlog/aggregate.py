"""Mood series and classification for trend display."""

from datetime import date

from .core.mood import Mood, average_mood, build_series, classify, count_buckets
from .entries import EntryStore


class MoodAggregator:
    """Derives chartable data from an EntryStore."""

    def __init__(self, store: EntryStore):
        self.store = store

    async def series(self, strict: bool = False) -> list[tuple[date, float]]:
        """(date, mood) points, oldest first."""
        return build_series(await self.store.list_all(strict=strict))

    @staticmethod
    def classify(mood: float) -> Mood:
        return classify(mood)

    async def buckets(self) -> dict[Mood, int]:
        """Number of days in each mood class."""
        return count_buckets(await self.series())

    async def average(self) -> float | None:
        return average_mood(await self.series())
