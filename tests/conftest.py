# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from todolist.storage import FileStorage, MemoryStorage
from todolist.store import TaskStore

from .fakes import RecordingStorage


@pytest.fixture()
def storage() -> RecordingStorage:
    """In-memory storage that also records every write."""
    return RecordingStorage()


@pytest.fixture()
def store(storage: RecordingStorage) -> TaskStore:
    return TaskStore(storage)


@pytest.fixture()
def file_storage(tmp_path: Path) -> FileStorage:
    return FileStorage(tmp_path / "slots")


@pytest.fixture()
def memory_storage() -> MemoryStorage:
    return MemoryStorage()
