# src/task_manager/tasks/task_validation.py

from __future__ import annotations

"""
Field presence checks.

Report-only: nothing here rejects or blocks a task. Each handler checks one
field; a present field passes control to the next handler, a missing one ends
the chain with a reason.
"""

from collections.abc import Callable, Sequence

from .task_models import Task

FieldCheck = Callable[[Task], str | None]


def check_title(task: Task) -> str | None:
    return None if task.title is not None else "missing title"


def check_description(task: Task) -> str | None:
    return None if task.description is not None else "missing description"


def check_due_date(task: Task) -> str | None:
    return None if task.due_date is not None else "missing due date"


DEFAULT_CHAIN: tuple[FieldCheck, ...] = (check_title, check_description, check_due_date)


def run_chain(task: Task, handlers: Sequence[FieldCheck] = DEFAULT_CHAIN) -> list[str]:
    """Walk the handlers in order; stop at the first missing field."""
    for handler in handlers:
        reason = handler(task)
        if reason is not None:
            return [reason]
    return []


def check_missing_fields(task: Task, handlers: Sequence[FieldCheck] = DEFAULT_CHAIN) -> list[str]:
    """Every missing-field reason, without stopping early."""
    reasons: list[str] = []
    for handler in handlers:
        reason = handler(task)
        if reason is not None:
            reasons.append(reason)
    return reasons
