"""
TASKLIST - User Notices
=======================
Short messages a front end shows after each action, classified as
success / warning / error / info.
"""

from enum import Enum

from pydantic import BaseModel

from .errors import NotFoundError, PersistenceError, TaskListError, ValidationError
from .schema import Task


class NoticeLevel(str, Enum):
    """Notice classes"""
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"


class Notice(BaseModel):
    level: NoticeLevel
    message: str

    @property
    def is_failure(self) -> bool:
        return self.level in (NoticeLevel.WARNING, NoticeLevel.ERROR)


NOTICE_ICONS = {
    NoticeLevel.SUCCESS: "✅",
    NoticeLevel.WARNING: "⚠️",
    NoticeLevel.ERROR: "❌",
    NoticeLevel.INFO: "ℹ️",
}


def added() -> Notice:
    return Notice(level=NoticeLevel.SUCCESS, message="Task added successfully!")


def toggled(task: Task) -> Notice:
    status = "completed" if task.completed else "marked as active"
    return Notice(level=NoticeLevel.INFO, message=f"Task {status}!")


def edited() -> Notice:
    return Notice(level=NoticeLevel.SUCCESS, message="Task updated successfully!")


def deleted() -> Notice:
    return Notice(level=NoticeLevel.INFO, message="Task deleted successfully!")


def cleared(count: int) -> Notice:
    if not count:
        return Notice(level=NoticeLevel.INFO, message="No completed tasks to clear!")
    return Notice(level=NoticeLevel.INFO, message=f"{count} completed task(s) cleared!")


def completed_all(count: int) -> Notice:
    if not count:
        return Notice(level=NoticeLevel.INFO, message="No active tasks to complete!")
    return Notice(level=NoticeLevel.SUCCESS, message=f"{count} task(s) marked as complete!")


def from_error(error: TaskListError) -> Notice:
    """Map a failed operation to what the user sees"""
    if isinstance(error, ValidationError):
        if error.field == "text":
            return Notice(level=NoticeLevel.WARNING, message="Please enter a task!")
        return Notice(level=NoticeLevel.WARNING, message=str(error))
    if isinstance(error, NotFoundError):
        return Notice(level=NoticeLevel.ERROR, message=f"Task not found: {error.task_id}")
    if isinstance(error, PersistenceError):
        return Notice(level=NoticeLevel.ERROR, message=f"Storage error: {error}")
    return Notice(level=NoticeLevel.ERROR, message=str(error))


def render(notice: Notice) -> str:
    return f"{NOTICE_ICONS[notice.level]} {notice.message}"
