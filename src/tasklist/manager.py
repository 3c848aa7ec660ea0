"""
TASKLIST - Task Manager
=======================
Owns the ordered task collection, applies mutations, and writes the full
collection back to its persistence slot after every change.

Newest tasks come first. Invalid input and unknown ids raise before the
collection is touched. A failed write raises PersistenceError after the
in-memory change has been applied.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional, Set, Union

from .errors import NotFoundError, PersistenceError, TaskListError, ValidationError
from .schema import (
    FilterStatus, Task, TaskStats,
    create_sample_tasks, dump_tasks, load_tasks
)
from .storage import PersistenceSlot

logger = logging.getLogger("tasklist")

DEFAULT_KEY = "todos"
MAX_ID_ATTEMPTS = 100

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def short_id() -> str:
    return uuid.uuid4().hex[:8]


class TaskManager:
    """
    Task list state holder

    Reads hand out copies; stored tasks change only through the operations
    below.

    Storage: one slot entry (default key "todos") holding the whole
    collection as a JSON array. Read once on construction; rewritten after
    every mutation.

    clock and id_factory are injectable so callers can make timestamps and
    ids deterministic.
    """

    def __init__(
        self,
        slot: PersistenceSlot,
        key: str = DEFAULT_KEY,
        clock: Optional[Clock] = None,
        id_factory: Optional[IdFactory] = None,
        seed_samples: bool = True
    ):
        self.slot = slot
        self.key = key
        self._clock = clock or utc_now
        self._id_factory = id_factory or short_id
        self._seed_samples = seed_samples
        self._tasks: List[Task] = []
        self._issued_ids: Set[str] = set()
        self.pending_error: Optional[PersistenceError] = None

        self.load()

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def load(self) -> List[Task]:
        """
        Load the collection from the slot, seeding samples on first run

        A failed seed write does not raise: the samples stay in memory, the
        error is kept in pending_error, and the next save writes them.
        """
        try:
            blob = self.slot.get(self.key)
        except Exception as exc:
            logger.error(f"❌ Could not read slot '{self.key}': {exc}")
            raise PersistenceError(f"could not read '{self.key}': {exc}", key=self.key) from exc

        if blob is None:
            if not self._seed_samples:
                self._tasks = []
                logger.info(f"📂 No stored tasks under '{self.key}', starting empty")
                return self.tasks

            self._tasks = create_sample_tasks(self._clock())
            self._issued_ids.update(t.id for t in self._tasks)
            logger.info(f"🌱 Seeded {len(self._tasks)} sample tasks under '{self.key}'")
            try:
                self.save()
            except PersistenceError:
                # save() recorded the error in pending_error
                logger.warning("⚠️ Sample tasks kept in memory only until the next save")
            return self.tasks

        try:
            self._tasks = load_tasks(blob)
        except ValueError as exc:
            logger.error(f"❌ Stored tasks under '{self.key}' are corrupt: {exc}")
            raise PersistenceError(f"corrupt task data under '{self.key}'", key=self.key) from exc
        self._issued_ids.update(t.id for t in self._tasks)

        stats = self.statistics()
        logger.info(
            f"📂 Loaded {stats.total} tasks from '{self.key}' "
            f"({stats.progress_pct}% complete)"
        )
        return self.tasks

    def save(self) -> None:
        """Write the full collection to the slot"""
        blob = self.serialize()
        try:
            self.slot.set(self.key, blob)
        except Exception as exc:
            # In-memory state stays as mutated; only the write is lost.
            logger.error(f"❌ Could not save tasks to '{self.key}': {exc}")
            error = PersistenceError(f"could not write '{self.key}': {exc}", key=self.key)
            self.pending_error = error
            raise error from exc

        self.pending_error = None
        logger.debug(f"💾 Saved {len(self._tasks)} tasks to '{self.key}'")

    def serialize(self) -> str:
        """Current collection in its stored form"""
        return dump_tasks(self._tasks)

    @property
    def tasks(self) -> List[Task]:
        """Copies of all tasks in display order"""
        return [t.model_copy() for t in self._tasks]

    def __len__(self) -> int:
        return len(self._tasks)

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def create(self, text: str) -> Task:
        """Add a task to the top of the list"""
        text = self._clean_text(text)

        task = Task(id=self._new_id(), text=text, completed=False, created_at=self._clock())
        self._tasks.insert(0, task)
        logger.info(f"➕ Added task [{task.id}] {task.text}")

        self.save()
        return task.model_copy()

    def get(self, task_id: str) -> Task:
        """Get a copy of the task with this ID"""
        return self._find(task_id).model_copy()

    def list(
        self,
        status: Union[FilterStatus, str] = FilterStatus.ALL,
        search: Optional[str] = ""
    ) -> List[Task]:
        """
        Tasks matching the search term and status, in collection order

        The search term is case-insensitive; an empty term matches all.
        """
        status = self._coerce_status(status)
        term = (search or "").strip()

        filtered = list(self._tasks)
        if term:
            filtered = [t for t in filtered if t.matches(term)]

        if status == FilterStatus.ACTIVE:
            filtered = [t for t in filtered if not t.completed]
        elif status == FilterStatus.COMPLETED:
            filtered = [t for t in filtered if t.completed]

        logger.debug(f"🔎 list status={status.value} search={term!r}: {len(filtered)} tasks")
        return [t.model_copy() for t in filtered]

    def toggle(self, task_id: str) -> Task:
        """Flip a task between active and completed"""
        task = self._find(task_id)

        task.completed = not task.completed
        task.updated_at = self._clock()
        logger.info(f"{'✅' if task.completed else '↩️'} Toggled task [{task.id}] completed={task.completed}")

        self.save()
        return task.model_copy()

    def edit(self, task_id: str, text: str) -> Task:
        """Replace a task's text"""
        text = self._clean_text(text)
        task = self._find(task_id)

        task.text = text
        task.updated_at = self._clock()
        logger.info(f"✏️ Edited task [{task.id}] {task.text}")

        self.save()
        return task.model_copy()

    def delete(self, task_id: str) -> None:
        """Remove a task"""
        self._find(task_id)

        self._tasks = [t for t in self._tasks if t.id != task_id]
        logger.info(f"🗑️ Deleted task [{task_id}]")

        self.save()

    def clear_completed(self) -> int:
        """Remove every completed task; returns how many were removed"""
        remaining = [t for t in self._tasks if not t.completed]
        removed = len(self._tasks) - len(remaining)

        if not removed:
            logger.info("No completed tasks to clear")
            return 0

        self._tasks = remaining
        logger.info(f"🧹 Cleared {removed} completed task(s)")

        self.save()
        return removed

    def mark_all_complete(self) -> int:
        """Complete every active task; returns how many changed"""
        active = [t for t in self._tasks if not t.completed]

        if not active:
            logger.info("No active tasks to complete")
            return 0

        now = self._clock()
        for task in active:
            task.completed = True
            task.updated_at = now
        logger.info(f"✅ Marked {len(active)} task(s) complete")

        self.save()
        return len(active)

    def statistics(self) -> TaskStats:
        """Total / active / completed counts"""
        return TaskStats.from_tasks(self._tasks)

    # ========================================
    # HELPER METHODS
    # ========================================

    def _find(self, task_id: str) -> Task:
        """Stored task by ID"""
        for task in self._tasks:
            if task.id == task_id:
                return task
        logger.warning(f"Task not found: {task_id}")
        raise NotFoundError(task_id)

    def _clean_text(self, text: Optional[str]) -> str:
        """Trim text; reject empty"""
        cleaned = (text or "").strip()
        if not cleaned:
            logger.warning("Rejected empty task text")
            raise ValidationError("task text must not be empty")
        return cleaned

    def _coerce_status(self, status: Union[FilterStatus, str]) -> FilterStatus:
        try:
            return FilterStatus(status)
        except ValueError:
            raise ValidationError(
                f"unknown filter {status!r}; expected one of: "
                + ", ".join(s.value for s in FilterStatus),
                field="status"
            ) from None

    def _new_id(self) -> str:
        """Generate an id never handed out by this manager"""
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = str(self._id_factory())
            if candidate and candidate not in self._issued_ids:
                self._issued_ids.add(candidate)
                return candidate
        raise TaskListError(f"could not generate a unique task id after {MAX_ID_ATTEMPTS} attempts")
