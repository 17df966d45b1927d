"""File-based key/value backend."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from urllib.parse import quote, unquote

import aiofiles
import aiofiles.os

from moodlog.errors import BackendError

logger = logging.getLogger(__name__)

SUFFIX = ".val"


class FileBackend:
    """
    Directory-per-namespace storage, one UTF-8 file per key.

    Implements KeyValueBackend protocol. Keys are percent-encoded into
    file names; writes go through a temp file and os.replace.
    """

    def __init__(self, root: Path | str):
        self.root = Path(root).expanduser()

    def _path_for_key(self, key: str) -> Path:
        """Get the file path for a given key."""
        if not key:
            raise BackendError("Storage key cannot be empty")
        return self.root / f"{quote(key, safe='')}{SUFFIX}"

    async def _ensure_root(self) -> None:
        try:
            await aiofiles.os.makedirs(self.root, exist_ok=True)
        except OSError as e:
            raise BackendError(f"Cannot create {self.root}: {e}") from e

    async def get(self, key: str) -> str | None:
        """Read a value. Returns None if not found."""
        path = self._path_for_key(key)
        try:
            # Undecodable bytes reach the caller as a corrupt value, not an I/O error
            async with aiofiles.open(path, "r", encoding="utf-8", errors="surrogateescape") as f:
                return await f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise BackendError(f"Cannot read {path}: {e}") from e

    async def set(self, key: str, value: str) -> None:
        """Write/overwrite a value atomically."""
        path = self._path_for_key(key)
        tmp = path.with_name(path.name + ".tmp")
        await self._ensure_root()
        try:
            async with aiofiles.open(tmp, "w", encoding="utf-8", errors="surrogateescape") as f:
                await f.write(value)
                await f.flush()
            await aiofiles.os.replace(tmp, path)
        except OSError as e:
            try:
                await aiofiles.os.remove(tmp)
            except OSError:
                pass
            raise BackendError(f"Cannot write {path}: {e}") from e
        logger.debug(f"Wrote {key} to {path}")

    async def remove(self, key: str) -> None:
        """Delete a key; a missing file is not an error."""
        path = self._path_for_key(key)
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            return
        except OSError as e:
            raise BackendError(f"Cannot remove {path}: {e}") from e
        logger.debug(f"Removed {key}")

    async def list_keys(self) -> set[str]:
        """All keys with a value file under the root."""
        try:
            names = await aiofiles.os.listdir(self.root)
        except FileNotFoundError:
            return set()
        except OSError as e:
            raise BackendError(f"Cannot list {self.root}: {e}") from e
        return {unquote(name[: -len(SUFFIX)]) for name in names if name.endswith(SUFFIX)}

    async def get_many(self, keys: Iterable[str]) -> dict[str, str | None]:
        return {key: await self.get(key) for key in keys}

    def __repr__(self) -> str:
        return f"FileBackend({str(self.root)!r})"
