"""Ports - interfaces/protocols for external dependencies."""

from .kv_backend import KeyValueBackend

__all__ = [
    "KeyValueBackend",
]
