"""
TASKLIST - Persistent To-Do List
================================

An ordered list of short text tasks with add / toggle / edit / delete,
search and status filters, and counts. The full list is written to a
persistence slot after every change.

Usage:
    from tasklist import TaskManager, FileSlot

    manager = TaskManager(FileSlot(".tasklist"))

    task = manager.create("Buy milk")
    manager.toggle(task.id)
    manager.list("active", search="milk")
    manager.statistics()          # TaskStats(total=..., active=..., completed=...)
"""

from .schema import (
    Task,
    TaskStats,
    FilterStatus,
    SAMPLE_TASKS,
    create_sample_tasks
)
from .errors import (
    TaskListError,
    ValidationError,
    NotFoundError,
    PersistenceError
)
from .storage import PersistenceSlot, MemorySlot, FileSlot
from .config import Settings
from .manager import TaskManager

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "Task",
    "TaskStats",
    "FilterStatus",
    "SAMPLE_TASKS",
    "create_sample_tasks",
    "TaskListError",
    "ValidationError",
    "NotFoundError",
    "PersistenceError",
    "PersistenceSlot",
    "MemorySlot",
    "FileSlot",
    "Settings"
]
