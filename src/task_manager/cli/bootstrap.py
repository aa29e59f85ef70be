# src/task_manager/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- creates the one TaskRegistry and wires it into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_registry import TaskRegistry
from ..tasks.task_sorting import SortKey

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    data_dir = getattr(settings, "data_dir", None)
    if data_dir is not None:
        data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, registry: TaskRegistry | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and registry are injectable so tests can build isolated states.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    sort_key = SortKey.parse(str(getattr(settings, "default_sort", SortKey.INSERTION)))

    state = AppState(
        settings=settings,
        registry=registry if registry is not None else TaskRegistry(),
        sort_key=sort_key,
    )
    logger.debug("AppState ready sort=%s", state.sort_key)
    return state
