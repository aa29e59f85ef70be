# src/task_manager/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from ..core.state import AppState
from .task_builder import TaskBuilder
from .task_models import Task, TaskRow, to_row
from .task_sorting import SortKey, sort_tasks
from .task_validation import run_chain

logger = logging.getLogger(__name__)


def parse_due_date(raw: str | None) -> datetime | None:
    """
    Parse a user-entered due date.

    Accepts ISO dates ("2024-01-01") and datetimes ("2024-01-01T09:30").
    Empty input means "no due date". Anything else raises ValueError.
    """
    if raw is None:
        return None
    s = raw.strip()
    if not s:
        return None
    return datetime.fromisoformat(s)


def add_task(
    state: AppState,
    *,
    title: str | None = None,
    description: str | None = None,
    due_date: datetime | None = None,
) -> Task:
    """Build a task from form values and store it in the registry."""
    task = (
        TaskBuilder()
        .set_title(title)
        .set_description(description)
        .set_due_date(due_date)
        .build()
    )

    if getattr(state.settings, "validate_on_add", False):
        reasons = run_chain(task)
        if reasons:
            # Report only; the task is still added.
            logger.debug("Task %s incomplete: %s", task.id, ", ".join(reasons))

    state.registry.add(task)
    logger.info("Task added id=%s title=%r", task.short_id, task.title)
    return task


def list_tasks(state: AppState, sort: SortKey | str | None = None) -> list[Task]:
    """Registry snapshot, ordered by `sort` or the session default."""
    key = state.sort_key if sort is None else sort
    return sort_tasks(state.registry.list(), key)


def remove_task(state: AppState, id_prefix: str) -> tuple[Task | None, int]:
    """
    Remove the task whose id starts with id_prefix.

    Returns (removed_task, match_count). Nothing is removed unless exactly one task matches.
    """
    matches = state.registry.find_by_prefix(id_prefix)
    if len(matches) != 1:
        return None, len(matches)

    removed = state.registry.remove_by_id(matches[0].id)
    if removed is not None:
        logger.info("Task removed id=%s", removed.short_id)
    return removed, 1


def render_rows(tasks: Iterable[Task], date_format: str = "%Y-%m-%d") -> list[TaskRow]:
    return [to_row(t, date_format) for t in tasks]
