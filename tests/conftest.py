# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_manager.cli.bootstrap import create_initial_state
from task_manager.core.state import AppState
from task_manager.tasks.task_registry import TaskRegistry
from task_manager.tasks.task_sorting import SortKey


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the command handlers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="task-manager-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        log_file=tmp_path / "data" / "task-manager.log",
        default_sort=SortKey.INSERTION,
        date_format="%Y-%m-%d",
        validate_on_add=False,
    )


@pytest.fixture()
def registry() -> TaskRegistry:
    return TaskRegistry()


@pytest.fixture()
def state(settings: SimpleNamespace, registry: TaskRegistry) -> AppState:
    return create_initial_state(settings=settings, registry=registry)
