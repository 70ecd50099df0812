# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from todolist.storage import MemoryStorage


class RecordingStorage(MemoryStorage):
    """
    MemoryStorage that keeps a log of (key, bytes) writes.

    Lets tests assert that a no-op operation really skipped the write.
    """

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        super().__init__(initial)
        self.writes: list[tuple[str, bytes]] = []

    def set(self, key: str, data: bytes) -> None:
        self.writes.append((key, data))
        super().set(key, data)


class ScriptedInput:
    """
    Stand-in for input() that replays a fixed list of lines.

    Raises EOFError once the script runs out, like a closed stdin.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None
