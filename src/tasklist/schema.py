"""
TASKLIST - Task Schema Definition
=================================
Task records, derived statistics, and the serialized collection format.

The whole collection is stored as one JSON array:
    [{"id": "1", "text": "...", "completed": false,
      "createdAt": "2026-01-28T09:00:00Z", "updatedAt": "..."}]
"""

import json
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, StrictBool, TypeAdapter, field_validator


class FilterStatus(str, Enum):
    """Which tasks a list view returns"""
    ALL = "all"               # Everything
    ACTIVE = "active"         # Not completed yet
    COMPLETED = "completed"   # Done


class Task(BaseModel):
    """Individual to-do item"""
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str = Field(frozen=True)
    text: str
    completed: StrictBool = False
    created_at: datetime = Field(alias="createdAt", frozen=True)
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("task text must not be empty")
        return value

    def matches(self, search: str) -> bool:
        """Case-insensitive substring match on the text"""
        return search.lower() in self.text.lower()


class TaskStats(BaseModel):
    """Aggregate counts over the collection"""
    total: int = 0
    active: int = 0
    completed: int = 0

    @property
    def progress_pct(self) -> int:
        if not self.total:
            return 0
        return int((self.completed / self.total) * 100)

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> "TaskStats":
        total = completed = 0
        for task in tasks:
            total += 1
            if task.completed:
                completed += 1
        return cls(total=total, active=total - completed, completed=completed)


# ============================================================
# SERIALIZATION
# ============================================================

_TASKS_ADAPTER = TypeAdapter(List[Task])


def dump_tasks(tasks: List[Task]) -> str:
    """Serialize the full collection as one JSON blob"""
    data = _TASKS_ADAPTER.dump_python(tasks, mode="json", by_alias=True, exclude_none=True)
    return json.dumps(data, ensure_ascii=False)


def load_tasks(blob: str) -> List[Task]:
    """
    Parse a serialized collection.

    Raises ValueError (json or pydantic) if the blob is not a valid
    collection, including when two tasks share an id.
    """
    tasks = _TASKS_ADAPTER.validate_python(json.loads(blob))

    seen = set()
    for task in tasks:
        if task.id in seen:
            raise ValueError(f"duplicate task id: {task.id}")
        seen.add(task.id)

    return tasks


# ============================================================
# SAMPLE DATA (first run)
# ============================================================

SAMPLE_TASKS: List[Dict[str, Any]] = [
    {"id": "1", "text": "Welcome to your To-Do List!", "completed": False},
    {"id": "2", "text": "Click the checkbox to mark tasks as complete", "completed": False},
    {"id": "3", "text": "Use the Edit button to modify tasks", "completed": False},
    {"id": "4", "text": "Try the search and filter features", "completed": True},
]


def create_sample_tasks(now: datetime) -> List[Task]:
    """Seed collection used when nothing has been stored yet"""
    return [Task(created_at=now, **sample) for sample in SAMPLE_TASKS]
