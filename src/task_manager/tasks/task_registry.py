# src/task_manager/tasks/task_registry.py

from __future__ import annotations

import logging
import threading
import uuid

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskRegistry:
    """
    In-memory, insertion-ordered task collection.

    One instance is created by the composition root (cli/bootstrap.py) and passed
    to whoever needs it; there is no global instance.

    Thread-safety:
    - every public method holds a single lock around the list
    - list() returns a copy, so callers can never mutate the registry through it
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._lock = threading.Lock()

    def add(self, task: Task) -> None:
        # No duplicate-id check: the builder guarantees fresh ids.
        with self._lock:
            self._tasks.append(task)
            total = len(self._tasks)
        logger.debug("Task added id=%s total=%s", task.id, total)

    def remove(self, task: Task) -> None:
        self.remove_by_id(task.id)

    def remove_by_id(self, task_id: uuid.UUID) -> Task | None:
        """Remove the first task with this id. Returns it, or None if nothing matched."""
        with self._lock:
            for i, t in enumerate(self._tasks):
                if t.id == task_id:
                    removed = self._tasks.pop(i)
                    break
            else:
                removed = None

        if removed is None:
            logger.debug("Task remove: no match id=%s", task_id)
        else:
            logger.debug("Task removed id=%s", task_id)
        return removed

    def list(self) -> list[Task]:
        with self._lock:
            return list(self._tasks)

    def get(self, task_id: uuid.UUID) -> Task | None:
        with self._lock:
            for t in self._tasks:
                if t.id == task_id:
                    return t
        return None

    def find_by_prefix(self, prefix: str) -> list[Task]:
        """Tasks whose id (hex or dashed form) starts with prefix. Case-insensitive."""
        p = prefix.strip().lower()
        if not p:
            return []
        with self._lock:
            return [t for t in self._tasks if t.id.hex.startswith(p) or str(t.id).startswith(p)]

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def clear(self) -> None:
        with self._lock:
            n = len(self._tasks)
            self._tasks.clear()
        logger.debug("Registry cleared removed=%s", n)
