"""In-memory key/value backend."""

from __future__ import annotations

from collections.abc import Iterable


class MemoryBackend:
    """
    Dict-backed storage that lives as long as the process.

    Implements KeyValueBackend protocol.
    """

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value

    async def remove(self, key: str) -> None:
        self.data.pop(key, None)

    async def list_keys(self) -> set[str]:
        return set(self.data)

    async def get_many(self, keys: Iterable[str]) -> dict[str, str | None]:
        return {key: self.data.get(key) for key in keys}
