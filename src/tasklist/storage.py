"""
TASKLIST - Persistence Slots
============================
A slot is a named string value: get(key) -> str | None, set(key, value).
The task manager stores its whole collection in one slot entry.
"""

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

logger = logging.getLogger("tasklist")

KEY_RE = re.compile(r"[A-Za-z0-9_-][A-Za-z0-9._-]*")


def check_key(key: str) -> str:
    """Slot keys are plain names: no path separators, no leading dot"""
    if not KEY_RE.fullmatch(key or ""):
        raise ValueError(f"invalid storage key {key!r}: use letters, digits, '.', '_' or '-'")
    return key


class PersistenceSlot(Protocol):
    """Key-value string storage used by TaskManager"""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemorySlot:
    """In-process slot (tests, embedding)"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class FileSlot:
    """
    File-backed slot

    Storage: {directory}/{key}.json
    Writes go to a temp file first and are renamed into place, so a reader
    never sees a partially written blob.
    """

    def __init__(self, directory: str = ".tasklist"):
        self.directory = Path(directory)

    def _get_file(self, key: str) -> Path:
        """Get path to the file holding a key"""
        check_key(key)
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        file_path = self._get_file(key)

        if not file_path.exists():
            logger.debug(f"Slot empty: {file_path}")
            return None

        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()

    def set(self, key: str, value: str) -> None:
        file_path = self._get_file(key)
        self.directory.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
