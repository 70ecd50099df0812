# tests/test_storage.py

from __future__ import annotations

from pathlib import Path

import pytest

from todolist.storage import FileStorage, MemoryStorage


def test_memory_storage_missing_key_is_none(memory_storage: MemoryStorage) -> None:
    assert memory_storage.get("tasks") is None


def test_memory_storage_overwrites_slot(memory_storage: MemoryStorage) -> None:
    memory_storage.set("tasks", b"one")
    memory_storage.set("tasks", b"two")
    assert memory_storage.get("tasks") == b"two"


def test_file_storage_creates_directory(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "dir"
    FileStorage(target)
    assert target.is_dir()


def test_file_storage_missing_key_is_none(file_storage: FileStorage) -> None:
    assert file_storage.get("tasks") is None


def test_file_storage_round_trips_bytes(file_storage: FileStorage) -> None:
    file_storage.set("tasks", b'[{"id": "x"}]')
    assert file_storage.get("tasks") == b'[{"id": "x"}]'
    assert (file_storage.directory / "tasks.json").exists()


def test_file_storage_keys_are_separate(file_storage: FileStorage) -> None:
    file_storage.set("a", b"1")
    file_storage.set("b", b"2")
    assert file_storage.get("a") == b"1"
    assert file_storage.get("b") == b"2"


def test_file_storage_survives_new_instance(tmp_path: Path) -> None:
    FileStorage(tmp_path).set("tasks", b"[]")
    assert FileStorage(tmp_path).get("tasks") == b"[]"


@pytest.mark.parametrize("key", ["../escape", "a/b", "a\\b", "..", ".", ""])
def test_file_storage_rejects_path_like_keys(file_storage: FileStorage, key: str) -> None:
    with pytest.raises(ValueError):
        file_storage.set(key, b"[]")
    with pytest.raises(ValueError):
        file_storage.get(key)
    assert not (file_storage.directory.parent / "escape.json").exists()
