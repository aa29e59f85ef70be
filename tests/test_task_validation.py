# tests/test_task_validation.py

from __future__ import annotations

from datetime import datetime

from task_manager.tasks.task_builder import build_task
from task_manager.tasks.task_models import TaskFields
from task_manager.tasks.task_validation import check_missing_fields, check_title, run_chain


def test_complete_task_passes_whole_chain() -> None:
    task = build_task(TaskFields(title="t", description="d", due_date=datetime(2024, 1, 1)))
    assert run_chain(task) == []
    assert check_missing_fields(task) == []


def test_chain_stops_at_first_missing_field() -> None:
    task = build_task(TaskFields(description=None, due_date=None, title="t"))
    assert run_chain(task) == ["missing description"]


def test_missing_title_ends_chain_before_other_checks() -> None:
    assert run_chain(build_task()) == ["missing title"]


def test_check_missing_fields_collects_all() -> None:
    assert check_missing_fields(build_task()) == [
        "missing title",
        "missing description",
        "missing due date",
    ]


def test_empty_string_counts_as_present() -> None:
    assert check_title(build_task(TaskFields(title=""))) is None


def test_custom_handler_sequence() -> None:
    task = build_task(TaskFields(title="t"))
    assert run_chain(task, handlers=[check_title]) == []
