# src/task_manager/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_registry import TaskRegistry
from ..tasks.task_sorting import SortKey


@dataclass
class AppState:
    # Settings object (config.Settings or any object with the same attributes).
    settings: object

    registry: TaskRegistry

    # Session-level list order; /sort changes it, the config only seeds it.
    sort_key: SortKey = SortKey.INSERTION
