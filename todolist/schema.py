"""
TO-DO LIST - Task Schema Definition
===================================
Task record and the JSON codec used for the persisted slot.

Persisted layout: [{"id": "<uuid>", "title": "<text>"}, ...]
"""

from typing import List, Sequence
import uuid

from pydantic import BaseModel, Field, TypeAdapter


class Task(BaseModel):
    """Individual to-do item"""
    id: uuid.UUID = Field(frozen=True)
    title: str


TaskSequence = TypeAdapter(List[Task])


def new_task(title: str) -> Task:
    """Create a task with a freshly generated id"""
    return Task(id=uuid.uuid4(), title=title)


def encode_tasks(tasks: Sequence[Task]) -> bytes:
    """Serialize the full task sequence to JSON bytes"""
    return TaskSequence.dump_json(list(tasks))


def decode_tasks(data: bytes) -> List[Task]:
    """
    Parse JSON bytes back into a task sequence.

    Raises pydantic.ValidationError (a ValueError) on malformed bytes
    or a schema mismatch, including records without an id.
    """
    return TaskSequence.validate_json(data)
