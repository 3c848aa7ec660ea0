# tests/conftest.py

from __future__ import annotations

import pytest

from tasklist.manager import TaskManager

from .fakes import FakeClock, RecordingSlot, SequentialIds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture()
def slot() -> RecordingSlot:
    return RecordingSlot()


@pytest.fixture()
def manager(slot: RecordingSlot, clock: FakeClock, ids: SequentialIds) -> TaskManager:
    """
    Empty manager (no sample seeding) with deterministic time and ids.
    """
    return TaskManager(slot, clock=clock, id_factory=ids, seed_samples=False)


@pytest.fixture()
def seeded(slot: RecordingSlot, clock: FakeClock, ids: SequentialIds) -> TaskManager:
    """Manager started on an empty slot, so it holds the four sample tasks."""
    return TaskManager(slot, clock=clock, id_factory=ids)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TASKLIST_DATA_DIR",
        "TASKLIST_STORAGE_KEY",
        "TASKLIST_LOG_LEVEL",
        "TASKLIST_SEED_SAMPLES",
    ):
        monkeypatch.delenv(name, raising=False)
