# tests/test_task_builder.py

from __future__ import annotations

import dataclasses
from datetime import datetime

import pytest

from task_manager.tasks.task_builder import TaskBuilder, build_task, new_task
from task_manager.tasks.task_models import TaskFields


def test_independently_built_tasks_have_distinct_ids() -> None:
    ids = {build_task().id for _ in range(200)}
    assert len(ids) == 200


def test_builder_chains_and_sets_fields() -> None:
    due = datetime(2024, 1, 1)
    task = TaskBuilder().set_title("Buy milk").set_description("2%").set_due_date(due).build()

    assert task.title == "Buy milk"
    assert task.description == "2%"
    assert task.due_date == due


def test_builder_reuse_gives_equal_fields_distinct_ids() -> None:
    builder = TaskBuilder().set_title("same")
    t1 = builder.build()
    t2 = builder.build()

    assert t1.id != t2.id
    assert (t1.title, t1.description, t1.due_date) == (t2.title, t2.description, t2.due_date)


def test_all_fields_unset_is_allowed() -> None:
    task = new_task()
    assert task.id is not None
    assert task.title is None
    assert task.description is None
    assert task.due_date is None


def test_empty_text_is_kept_not_unset() -> None:
    task = build_task(TaskFields(title="", description=""))
    assert task.title == ""
    assert task.description == ""


def test_task_is_frozen() -> None:
    task = build_task(TaskFields(title="x"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        task.title = "y"  # type: ignore[misc]
