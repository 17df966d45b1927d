"""Wiring between configuration and the store services.

The CLI builds everything it needs through these functions.
"""

from dataclasses import dataclass
from pathlib import Path

from .adapters.file_kv import FileBackend
from .adapters.memory_kv import MemoryBackend
from .aggregate import MoodAggregator
from .config import DATA_DIR, Config
from .entries import EntryStore
from .ports.kv_backend import KeyValueBackend
from .profile import ProfileStore

ENTRIES_NAMESPACE = "entries"
PROFILE_NAMESPACE = "profile"


@dataclass
class Stores:
    """Services sharing one configuration."""

    entries: EntryStore
    profile: ProfileStore
    moods: MoodAggregator


def get_data_dir(config: Config) -> Path:
    """Resolve data directory from config."""
    if config.data_dir:
        return Path(config.data_dir).expanduser()
    return DATA_DIR


def get_backends(config: Config) -> tuple[KeyValueBackend, KeyValueBackend]:
    """Build the (entries, profile) backends, one per namespace."""
    if config.backend == "memory":
        return MemoryBackend(), MemoryBackend()
    data_dir = get_data_dir(config)
    return FileBackend(data_dir / ENTRIES_NAMESPACE), FileBackend(data_dir / PROFILE_NAMESPACE)


def open_stores(config: Config) -> Stores:
    """Build the entry, profile, and mood services for a configuration."""
    entries_backend, profile_backend = get_backends(config)
    entries = EntryStore(entries_backend)
    return Stores(
        entries=entries,
        profile=ProfileStore(profile_backend),
        moods=MoodAggregator(entries),
    )
