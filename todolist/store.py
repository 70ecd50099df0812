"""
TO-DO LIST - Task Store
=======================
Owns the in-memory task sequence and keeps the persisted slot in step
with it: every mutation re-encodes the whole sequence and overwrites
the slot.

Decode and encode failures never reach the caller. A slot that cannot
be decoded loads as an empty list; a sequence that cannot be encoded is
simply not written.
"""

from typing import AbstractSet, Iterator, List, Optional, Tuple
import logging

from .schema import Task, decode_tasks, encode_tasks, new_task
from .storage import DEFAULT_KEY, KeyValueStorage

logger = logging.getLogger("todolist")

LIST_TITLE = "To-Do List"


class TaskStore:
    """
    Task sequence bound to one storage slot.

    The sequence is loaded from the slot on construction.
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_KEY):
        self.storage = storage
        self.key = key
        self._tasks: List[Task] = []
        self.load()

    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def load(self) -> List[Task]:
        """Load the sequence from the slot; empty if absent or undecodable"""
        data = self.storage.get(self.key)
        if data is None:
            logger.info(f"📂 No saved tasks under '{self.key}', starting empty")
            self._tasks = []
            return []

        try:
            tasks = decode_tasks(data)
        except ValueError as e:
            logger.warning(f"Could not decode slot '{self.key}', starting empty: {e}")
            tasks = []

        self._tasks = tasks
        logger.info(f"📂 Loaded {len(tasks)} task(s) from '{self.key}'")
        return list(tasks)

    def persist(self) -> None:
        """Overwrite the slot with the full sequence; skipped if encoding fails"""
        try:
            data = encode_tasks(self._tasks)
        except ValueError as e:
            logger.warning(f"Could not encode tasks, slot '{self.key}' left unchanged: {e}")
            return

        self.storage.set(self.key, data)
        logger.debug(f"💾 Saved {len(self._tasks)} task(s) to '{self.key}'")

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add(self, title: str) -> Optional[Task]:
        """Append a new task; empty titles are ignored"""
        if not title:
            logger.debug("Ignoring empty task title")
            return None

        task = new_task(title)
        self._tasks.append(task)
        self.persist()

        logger.info(f"✅ Added task: {task.title} ({task.id})")
        return task

    def remove(self, positions: AbstractSet[int]) -> List[Task]:
        """
        Remove the tasks at the given positions in one batch.

        Positions index the sequence as it is before the call, so
        removing {0, 2} from [A, B, C] leaves [B]. Positions outside the
        sequence are ignored.
        """
        if not positions:
            return []

        removed: List[Task] = []
        kept: List[Task] = []
        for i, task in enumerate(self._tasks):
            if i in positions:
                removed.append(task)
            else:
                kept.append(task)

        self._tasks = kept
        self.persist()

        for task in removed:
            logger.info(f"🗑️ Removed task: {task.title} ({task.id})")
        return removed

    # ========================================
    # REPORTING
    # ========================================

    def get_list_report(self) -> str:
        """Render the list with 1-based row numbers"""
        lines = [f"📋 {LIST_TITLE}", ""]

        if not self._tasks:
            lines.append("  (no tasks)")
        for i, task in enumerate(self._tasks, start=1):
            lines.append(f"  {i:>3}. {task.title}")

        return "\n".join(lines)
