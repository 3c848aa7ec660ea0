"""
TASKLIST - Settings
===================
Settings come from TASKLIST_* environment variables; CLI flags override.

    TASKLIST_DATA_DIR       directory for the file slot (default .tasklist)
    TASKLIST_STORAGE_KEY    slot key holding the collection (default todos)
    TASKLIST_LOG_LEVEL      logging level name (default INFO)
    TASKLIST_SEED_SAMPLES   seed sample tasks on first run (default true)
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

from .storage import check_key

ENV_PREFIX = "TASKLIST"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


class Settings(BaseModel):
    """Runtime configuration"""
    data_dir: str = ".tasklist"
    storage_key: str = "todos"
    log_level: str = "INFO"
    seed_samples: bool = True

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @field_validator("storage_key")
    @classmethod
    def _key_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("storage key must not be empty")
        return check_key(value)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        values = {}

        for field, suffix in (
            ("data_dir", "DATA_DIR"),
            ("storage_key", "STORAGE_KEY"),
            ("log_level", "LOG_LEVEL"),
        ):
            raw = env.get(_k(suffix))
            if raw is not None and raw.strip() != "":
                values[field] = raw

        values["seed_samples"] = _env_bool(env.get(_k("SEED_SAMPLES")), True)
        return cls(**values)
