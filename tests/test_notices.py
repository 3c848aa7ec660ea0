# tests/test_notices.py

from __future__ import annotations

from datetime import datetime, timezone

from tasklist import notices
from tasklist.errors import NotFoundError, PersistenceError, ValidationError
from tasklist.notices import NoticeLevel
from tasklist.schema import Task


def test_toggle_notice_follows_task_state() -> None:
    task = Task(id="a", text="x", completed=True, created_at=datetime.now(timezone.utc))
    assert notices.toggled(task).message == "Task completed!"
    task.completed = False
    assert notices.toggled(task).message == "Task marked as active!"


def test_zero_counts_are_informational() -> None:
    assert notices.cleared(0).level == NoticeLevel.INFO
    assert notices.cleared(0).message == "No completed tasks to clear!"
    assert notices.cleared(2).message == "2 completed task(s) cleared!"
    assert notices.completed_all(0).level == NoticeLevel.INFO
    assert notices.completed_all(3).level == NoticeLevel.SUCCESS
    assert not notices.completed_all(0).is_failure


def test_errors_map_to_levels() -> None:
    assert notices.from_error(ValidationError("empty")).message == "Please enter a task!"
    assert notices.from_error(ValidationError("bad filter", field="status")).message == "bad filter"
    assert notices.from_error(NotFoundError("x")).level == NoticeLevel.ERROR
    assert notices.from_error(PersistenceError("disk full")).is_failure


def test_render() -> None:
    assert notices.render(notices.added()) == "✅ Task added successfully!"
