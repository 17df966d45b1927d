"""Every module imports cleanly."""

import importlib

import pytest

MODULES = [
    "moodlog.ports",
    "moodlog.ports.kv_backend",
    "moodlog.adapters",
    "moodlog.adapters.memory_kv",
    "moodlog.adapters.file_kv",
    "moodlog.core",
    "moodlog.entries",
    "moodlog.aggregate",
    "moodlog.profile",
    "moodlog.config",
    "moodlog.workflows",
    "moodlog.cli",
]


@pytest.mark.parametrize("name", MODULES)
def test_module_imports(name):
    assert importlib.import_module(name)


def test_backends_expose_list_keys():
    from moodlog.adapters import FileBackend, MemoryBackend

    for cls in (FileBackend, MemoryBackend):
        assert callable(cls.set)
        assert callable(cls.list_keys)
