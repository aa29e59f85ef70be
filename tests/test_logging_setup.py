# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_manager.config import Settings
from task_manager.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_writes_to_the_settings_log_file(monkeypatch, tmp_path: Path, restore_root_logging) -> None:
    monkeypatch.setenv("TASKMGR_DATA_DIR", str(tmp_path / "nested"))
    settings = Settings.from_env()

    written = setup_logging(log_file=settings.log_file)
    logging.getLogger("task_manager.tasks.task_registry").debug("hello from the registry")
    for h in logging.getLogger().handlers:
        h.flush()

    assert written == settings.log_file
    assert "hello from the registry" in settings.log_file.read_text("utf-8")


def test_console_filter() -> None:
    f = _ConsoleNoiseFilter()

    # Task and command logs are echoed by the reply; only problems reach the console.
    assert not f.filter(_record("task_manager.tasks.task_api", logging.INFO))
    assert f.filter(_record("task_manager.tasks.task_api", logging.WARNING))
    assert not f.filter(_record("task_manager.cli.commands", logging.INFO))

    assert f.filter(_record("task_manager.cli.main", logging.INFO))
    assert f.filter(_record("task_manager.connectors.console_connector", logging.INFO))

    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
