"""Date-indexed journal entry store.

Entries live in their own key/value namespace, one value per YYYY-MM-DD
key. Keys that are not date keys are never read as entries.
"""

import logging
from datetime import date

from .core.datekey import is_future, is_valid_key, parse_key
from .core.entry import JournalEntry, decode_entry, encode_entry, validate_entry
from .errors import CorruptEntry, DecodeError, ValidationError
from .ports.kv_backend import KeyValueBackend

logger = logging.getLogger(__name__)


def _check_key(key: str) -> None:
    if not is_valid_key(key):
        raise ValidationError(f"Invalid date key {key!r}, expected YYYY-MM-DD")


class EntryStore:
    """CRUD over journal entries on top of an injected backend."""

    def __init__(self, backend: KeyValueBackend):
        self.backend = backend

    def _validate_write(self, key: str, entry: JournalEntry, as_of: date | None) -> None:
        _check_key(key)
        validate_entry(entry)
        as_of = as_of or date.today()
        if is_future(key, as_of):
            raise ValidationError(f"Cannot write an entry for {key}, after {as_of.isoformat()}")

    async def save(self, key: str, entry: JournalEntry, as_of: date | None = None) -> None:
        """
        Validate and write an entry, replacing any existing one.

        as_of is the current local day; entries after it are rejected.
        """
        self._validate_write(key, entry, as_of)
        await self.backend.set(key, encode_entry(entry))
        logger.info(f"Saved entry {key}")

    async def load(self, key: str) -> JournalEntry | None:
        """Read an entry. Returns None if not found, raises CorruptEntry if unreadable."""
        _check_key(key)
        raw = await self.backend.get(key)
        if raw is None:
            return None
        try:
            return decode_entry(raw)
        except DecodeError as e:
            raise CorruptEntry(key, str(e)) from e

    async def exists(self, key: str) -> bool:
        """Check if an entry is stored for a key."""
        _check_key(key)
        return await self.backend.get(key) is not None

    async def delete(self, key: str) -> None:
        """Remove an entry. Deleting an absent entry is a no-op."""
        _check_key(key)
        await self.backend.remove(key)
        logger.info(f"Deleted entry {key}")

    async def rename(
        self,
        old_key: str,
        new_key: str,
        entry: JournalEntry,
        as_of: date | None = None,
    ) -> None:
        """
        Move an edited entry to a new date.

        The new key is written before the old one is removed, so a failed
        write leaves the old entry untouched. A failed remove leaves both.
        """
        _check_key(old_key)
        self._validate_write(new_key, entry, as_of)

        await self.backend.set(new_key, encode_entry(entry))
        if new_key == old_key:
            logger.info(f"Saved entry {new_key}")
            return

        try:
            await self.backend.remove(old_key)
        except Exception:
            logger.warning(f"Entry {new_key} written but {old_key} could not be removed")
            raise
        logger.info(f"Moved entry {old_key} -> {new_key}")

    async def list_all(self, strict: bool = False) -> list[tuple[str, JournalEntry]]:
        """
        All readable entries, most recent first.

        Undecodable values are skipped unless strict is set, in which case
        the first one raises CorruptEntry.
        """
        keys = sorted(k for k in await self.backend.list_keys() if is_valid_key(k))
        if not keys:
            return []

        values = await self.backend.get_many(keys)
        entries = []
        for key in keys:
            raw = values.get(key)
            if raw is None:
                continue
            try:
                entries.append((key, decode_entry(raw)))
            except DecodeError as e:
                if strict:
                    raise CorruptEntry(key, str(e)) from e
                logger.warning(f"Skipping corrupt entry {key}: {e}")

        entries.sort(key=lambda item: item[0], reverse=True)
        return entries

    async def list_range(
        self,
        start: date | None = None,
        end: date | None = None,
        strict: bool = False,
    ) -> list[tuple[str, JournalEntry]]:
        """Entries within an inclusive date range, most recent first."""
        return [
            (key, entry)
            for key, entry in await self.list_all(strict=strict)
            if (start is None or parse_key(key) >= start) and (end is None or parse_key(key) <= end)
        ]
