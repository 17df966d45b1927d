"""Adapters - I/O implementations of ports."""

from .memory_kv import MemoryBackend
from .file_kv import FileBackend

__all__ = [
    "MemoryBackend",
    "FileBackend",
]
