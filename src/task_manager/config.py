# src/task_manager/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
- Malformed values fall back to defaults instead of failing startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.task_sorting import SortKey

ENV_PREFIX = "TASKMGR"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_date_format(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or "%" not in raw:
        return default
    return raw


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Task list ----
    default_sort: SortKey
    date_format: str
    validate_on_add: bool

    @property
    def log_file(self) -> Path:
        return self.data_dir / "task-manager.log"

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-manager").strip() or "task-manager"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task-manager"))

        default_sort = SortKey.parse(_env(_k("DEFAULT_SORT"), SortKey.INSERTION.value))
        date_format = _env_date_format(_k("DATE_FORMAT"), "%Y-%m-%d")
        validate_on_add = _env_bool(_k("VALIDATE_ON_ADD"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            default_sort=default_sort,
            date_format=date_format,
            validate_on_add=validate_on_add,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
