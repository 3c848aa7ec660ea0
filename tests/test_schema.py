# tests/test_schema.py

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from tasklist.schema import SAMPLE_TASKS, Task, TaskStats, create_sample_tasks, dump_tasks, load_tasks

NOW = datetime(2026, 1, 28, 9, 0, tzinfo=timezone.utc)


def test_dump_uses_stored_field_names() -> None:
    task = Task(id="a", text="Buy milk", created_at=NOW)
    done = Task(id="b", text="Done", completed=True, created_at=NOW, updated_at=NOW)

    data = json.loads(dump_tasks([task, done]))

    assert data[0] == {
        "id": "a",
        "text": "Buy milk",
        "completed": False,
        "createdAt": "2026-01-28T09:00:00Z",
    }
    assert data[1]["updatedAt"] == "2026-01-28T09:00:00Z"


def test_load_accepts_browser_style_timestamps() -> None:
    blob = json.dumps([
        {"id": "1700000000000", "text": "From the web", "completed": True,
         "createdAt": "2026-01-28T09:00:00.123Z", "updatedAt": "2026-01-29T10:00:00.000Z"},
    ])
    (task,) = load_tasks(blob)
    assert task.completed is True
    assert task.created_at == datetime(2026, 1, 28, 9, 0, 0, 123000, tzinfo=timezone.utc)
    assert task.updated_at is not None


@pytest.mark.parametrize(
    "entry",
    [
        {"id": "1", "text": "   ", "completed": False, "createdAt": "2026-01-28T09:00:00Z"},
        {"id": "1", "text": "x", "completed": "yes", "createdAt": "2026-01-28T09:00:00Z"},
        {"id": "1", "text": "x", "completed": 1, "createdAt": "2026-01-28T09:00:00Z"},
        {"id": "1", "text": "x", "completed": False},
    ],
)
def test_load_rejects_invalid_tasks(entry: dict) -> None:
    with pytest.raises(ValueError):
        load_tasks(json.dumps([entry]))


def test_load_rejects_non_list() -> None:
    with pytest.raises(ValueError):
        load_tasks('{"todos": []}')


def test_task_text_is_trimmed() -> None:
    assert Task(id="a", text="  padded  ", created_at=NOW).text == "padded"


def test_sample_tasks() -> None:
    tasks = create_sample_tasks(NOW)
    assert [t.id for t in tasks] == ["1", "2", "3", "4"]
    assert [t.completed for t in tasks] == [False, False, False, True]
    assert all(t.created_at == NOW for t in tasks)
    assert len(SAMPLE_TASKS) == 4


def test_stats_from_tasks() -> None:
    stats = TaskStats.from_tasks(create_sample_tasks(NOW))
    assert (stats.total, stats.active, stats.completed) == (4, 3, 1)
    assert stats.progress_pct == 25
    assert TaskStats.from_tasks([]).progress_pct == 0
