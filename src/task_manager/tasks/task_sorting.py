# src/task_manager/tasks/task_sorting.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from enum import StrEnum

from .task_models import Task


class SortKey(StrEnum):
    INSERTION = "insertion"
    TITLE = "title"
    DUE_DATE = "due_date"

    @classmethod
    def lookup(cls, raw: str | None) -> SortKey | None:
        """Strict parsing for explicit user commands. Returns None for unknown words."""
        if raw is None:
            return None
        s = raw.strip().lower().replace("-", "_")
        if s in ("due", "date", "duedate"):
            return cls.DUE_DATE
        try:
            return cls(s)
        except ValueError:
            return None

    @classmethod
    def parse(cls, raw: str | None) -> SortKey:
        """Lenient parsing for config input. Unknown values fall back to insertion order."""
        return cls.lookup(raw) or cls.INSERTION

    @classmethod
    def choices(cls) -> str:
        return " | ".join(k.value for k in cls)


def _title_key(task: Task) -> str:
    return task.title or ""


def _due_key(task: Task) -> tuple[bool, datetime | None]:
    # Unset sorts first. Aware values compare as naive UTC so they can meet naive ones.
    due = task.due_date
    if due is not None and due.tzinfo is not None:
        due = due.astimezone(timezone.utc).replace(tzinfo=None)
    return (due is not None, due)


def sort_by_title(tasks: Iterable[Task]) -> list[Task]:
    return sorted(tasks, key=_title_key)


def sort_by_due_date(tasks: Iterable[Task]) -> list[Task]:
    return sorted(tasks, key=_due_key)


def sort_tasks(tasks: Iterable[Task], key: SortKey | str = SortKey.INSERTION) -> list[Task]:
    """
    Return a new, ordered list. The input is never mutated.

    All orders are stable: ties keep their original relative order.
    """
    if not isinstance(key, SortKey):
        key = SortKey.parse(key)

    if key is SortKey.TITLE:
        return sort_by_title(tasks)
    if key is SortKey.DUE_DATE:
        return sort_by_due_date(tasks)
    return list(tasks)
