# tests/fakes.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, Iterator, List, Optional


class FakeClock:
    """
    Deterministic clock: every call returns the next second after `start`.
    """

    def __init__(self, start: Optional[datetime] = None) -> None:
        self.now = start or datetime(2026, 1, 28, 9, 0, tzinfo=timezone.utc)
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.now
        self.now = self.now + timedelta(seconds=1)
        self.calls += 1
        return value


class SequentialIds:
    """Yields ids from a fixed sequence, then t1, t2, ..."""

    def __init__(self, preset: Iterable[str] = ()) -> None:
        self._preset: Iterator[str] = iter(list(preset))
        self._n = 0

    def __call__(self) -> str:
        for value in self._preset:
            return value
        self._n += 1
        return f"t{self._n}"


class RecordingSlot:
    """Dict-backed slot that records every write."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.values: Dict[str, str] = dict(initial or {})
        self.writes: List[tuple[str, str]] = []

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        self.values[key] = value


class FailingSlot(RecordingSlot):
    """Slot whose writes (and optionally reads) raise, like a full disk or quota error."""

    def __init__(self, initial: Optional[Dict[str, str]] = None, fail_reads: bool = False) -> None:
        super().__init__(initial)
        self.fail_reads = fail_reads
        self.fail_writes = True

    def get(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise OSError("storage unavailable")
        return super().get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("quota exceeded")
        super().set(key, value)
