"""
TASKLIST - Error Types
======================
Every failure the task manager reports is a TaskListError.
Callers recover at the call site; state is never left half-applied.
"""

from typing import Optional


class TaskListError(Exception):
    """Base class for task list errors"""


class ValidationError(TaskListError, ValueError):
    """Rejected input (empty task text, unknown filter)"""

    def __init__(self, message: str, field: str = "text"):
        super().__init__(message)
        self.field = field


class NotFoundError(TaskListError, KeyError):
    """No task with the requested id"""

    def __init__(self, task_id: str):
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"Task not found: {self.task_id}"


class PersistenceError(TaskListError):
    """Persistence slot could not be read or written"""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key
