# src/task_manager/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do item.

    Notes:
    - id is generated once by the builder and never reassigned.
    - every other field may be unset (None); there is no required-field rule here.
    """

    id: uuid.UUID
    title: str | None = None
    description: str | None = None
    due_date: datetime | None = None

    @property
    def short_id(self) -> str:
        return self.id.hex[:8]


@dataclass(frozen=True, slots=True)
class TaskFields:
    """Raw field values collected by a form, passed to build_task()."""

    title: str | None = None
    description: str | None = None
    due_date: datetime | None = None


@dataclass(frozen=True, slots=True)
class TaskRow:
    """What the list view renders for one task. Unset fields are blank strings."""

    id: str
    title: str
    description: str
    due: str


def to_row(task: Task, date_format: str = "%Y-%m-%d") -> TaskRow:
    due = task.due_date.strftime(date_format) if task.due_date is not None else ""
    return TaskRow(
        id=str(task.id),
        title=task.title or "",
        description=task.description or "",
        due=due,
    )
