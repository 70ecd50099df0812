"""
TO-DO LIST - Key-Value Storage
==============================
Byte slots addressed by a fixed key. The task store only needs
get(key) -> bytes | None and set(key, bytes); any backend satisfying
that contract is interchangeable.
"""

from pathlib import Path
from typing import Dict, Optional, Protocol, Union
import logging

logger = logging.getLogger("todolist.storage")

DEFAULT_STORAGE_DIR = ".todolist"
DEFAULT_KEY = "tasks"


class KeyValueStorage(Protocol):
    def get(self, key: str) -> Optional[bytes]:
        ...

    def set(self, key: str, data: bytes) -> None:
        ...


class MemoryStorage:
    """Dict-backed slots; nothing survives the process"""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._slots: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self._slots.get(key)

    def set(self, key: str, data: bytes) -> None:
        self._slots[key] = data


class FileStorage:
    """
    One file per key: {directory}/{key}.json

    Each set() overwrites the whole file.
    """

    def __init__(self, directory: Union[str, Path] = DEFAULT_STORAGE_DIR):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _get_slot_file(self, key: str) -> Path:
        """Get path to the file backing a slot; the key must be a plain name"""
        if not key or key in (".", "..") or "/" in key or "\\" in key:
            raise ValueError(f"Invalid slot key: {key!r}")
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[bytes]:
        file_path = self._get_slot_file(key)
        if not file_path.exists():
            logger.debug(f"Slot not found: {file_path}")
            return None
        return file_path.read_bytes()

    def set(self, key: str, data: bytes) -> None:
        file_path = self._get_slot_file(key)
        file_path.write_bytes(data)
        logger.debug(f"Wrote {len(data)} bytes to {file_path}")
