# src/task_manager/tasks/task_builder.py

from __future__ import annotations

"""
Task construction.

build_task() is the one place where Task ids are generated.
TaskBuilder is a fluent front for forms that collect fields one by one.
"""

import uuid
from dataclasses import replace
from datetime import datetime

from .task_models import Task, TaskFields


def build_task(fields: TaskFields | None = None) -> Task:
    """Return a new Task with a fresh id. Any value is accepted, including empty text."""
    if fields is None:
        fields = TaskFields()
    return Task(
        id=uuid.uuid4(),
        title=fields.title,
        description=fields.description,
        due_date=fields.due_date,
    )


def new_task() -> Task:
    """A task that carries only its id."""
    return build_task()


class TaskBuilder:
    """
    Accumulates field values, then produces a Task.

    The builder may be reused: each build() yields a new Task with the same
    field values and a distinct id.
    """

    def __init__(self) -> None:
        self._fields = TaskFields()

    def set_title(self, title: str | None) -> TaskBuilder:
        self._fields = replace(self._fields, title=title)
        return self

    def set_description(self, description: str | None) -> TaskBuilder:
        self._fields = replace(self._fields, description=description)
        return self

    def set_due_date(self, due_date: datetime | None) -> TaskBuilder:
        self._fields = replace(self._fields, due_date=due_date)
        return self

    @property
    def fields(self) -> TaskFields:
        return self._fields

    def build(self) -> Task:
        return build_task(self._fields)
