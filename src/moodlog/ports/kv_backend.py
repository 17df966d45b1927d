"""Key/value backend interface."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class KeyValueBackend(Protocol):
    """
    Asynchronous string-to-string storage for one namespace.

    Any method may raise BackendError. There are no transactions.
    """

    async def get(self, key: str) -> str | None:
        """Read a value. Returns None if the key is absent."""
        ...

    async def set(self, key: str, value: str) -> None:
        """Write/overwrite a value."""
        ...

    async def remove(self, key: str) -> None:
        """Delete a key. Absent keys are ignored."""
        ...

    async def list_keys(self) -> set[str]:
        """All keys currently stored."""
        ...

    async def get_many(self, keys: Iterable[str]) -> dict[str, str | None]:
        """Read several keys at once; absent keys map to None."""
        ...
