"""
TO-DO LIST - Persistent Task List
=================================

A single ordered list of short text tasks, saved to a local key-value
slot after every change.

Usage:
    from todolist import TaskStore, FileStorage

    store = TaskStore(FileStorage(".todolist"))
    store.add("Buy milk")
    store.add("Call mom")

    # Delete by position (as it stood before the call)
    store.remove({0})
    print(store.get_list_report())
"""

from .schema import (
    Task,
    TaskSequence,
    new_task,
    encode_tasks,
    decode_tasks
)

from .storage import (
    KeyValueStorage,
    MemoryStorage,
    FileStorage,
    DEFAULT_KEY,
    DEFAULT_STORAGE_DIR
)

from .store import TaskStore

__version__ = "1.0.0"
__all__ = [
    "TaskStore",
    "Task",
    "TaskSequence",
    "new_task",
    "encode_tasks",
    "decode_tasks",
    "KeyValueStorage",
    "MemoryStorage",
    "FileStorage",
    "DEFAULT_KEY",
    "DEFAULT_STORAGE_DIR"
]
