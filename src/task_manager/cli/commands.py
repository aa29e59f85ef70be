# src/task_manager/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_api import add_task, list_tasks, parse_due_date, remove_task, render_rows
from ..tasks.task_sorting import SortKey

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        # Arguments keep their spacing; /add splits on '|' itself.
        args = [parts[1]] if len(parts) > 1 else []

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _arg_words(args: list[str]) -> list[str]:
    return args[0].split() if args else []


def _blank_to_none(s: str) -> str | None:
    s = s.strip()
    return s or None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /add title | description | 2024-01-01

    Any field may be left empty. Missing trailing fields are unset.
    """
    if not args:
        return "Usage: /add title | description | YYYY-MM-DD"

    fields = [f.strip() for f in args[0].split("|")]
    if len(fields) > 3:
        return "Too many fields. Usage: /add title | description | YYYY-MM-DD"
    fields += [""] * (3 - len(fields))
    title_raw, description_raw, due_raw = fields

    try:
        due_date = parse_due_date(due_raw)
    except ValueError:
        return f"Invalid due date: {due_raw!r}. Use YYYY-MM-DD or YYYY-MM-DDTHH:MM."

    task = add_task(
        state,
        title=_blank_to_none(title_raw),
        description=_blank_to_none(description_raw),
        due_date=due_date,
    )
    return f"Added task {task.short_id}. Total: {state.registry.count()}"


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list            -> current session order
    /list title|due  -> one-off order
    """
    words = _arg_words(args)
    sort = None
    if words:
        sort = SortKey.lookup(words[0])
        if sort is None:
            return f"Unknown order: {words[0]!r}. Use one of: {SortKey.choices()}."
    tasks = list_tasks(state, sort)
    if not tasks:
        return "No tasks yet. Use /add to create one."

    date_format = str(getattr(state.settings, "date_format", "%Y-%m-%d"))
    lines = [f"Tasks ({sort or state.sort_key}):"]
    for i, row in enumerate(render_rows(tasks, date_format), start=1):
        lines.append(f"{i}. [{row.id[:8]}] {row.title}")
        if row.description:
            lines.append(f"     {row.description}")
        if row.due:
            lines.append(f"     due: {row.due}")
    return "\n".join(lines)


def cmd_remove(state: AppState, args: list[str]) -> str:
    words = _arg_words(args)
    if not words:
        return "Usage: /remove <task id or id prefix>"

    removed, matches = remove_task(state, words[0])
    if removed is not None:
        return f"Removed task {removed.short_id}. Total: {state.registry.count()}"
    if matches == 0:
        return f"No task matches {words[0]!r}."
    return f"{matches} tasks match {words[0]!r}. Use a longer id prefix."


def cmd_sort(state: AppState, args: list[str]) -> str:
    """
    /sort                        -> show current order
    /sort title|due|insertion    -> change it for this session
    """
    words = _arg_words(args)
    if not words:
        return f"List order is {state.sort_key}. Use /sort title | due | insertion."

    key = SortKey.lookup(words[0])
    if key is None:
        return f"Unknown order: {words[0]!r}. Use one of: {SortKey.choices()}."

    state.sort_key = key
    return f"List order set to {state.sort_key}."


def cmd_status(state: AppState, args: list[str]) -> str:
    validate = "ON" if getattr(state.settings, "validate_on_add", False) else "OFF"
    log_file = getattr(state.settings, "log_file", "-")
    return (
        "Status:\n"
        f"  Tasks: {state.registry.count()}\n"
        f"  List order: {state.sort_key}\n"
        f"  Field checks on add: {validate}\n"
        f"  Log file: {log_file}"
    )


def cmd_clear(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    n = state.registry.count()
    if emit is not None and n:
        emit(f"Removing {n} task(s)...")
    state.registry.clear()
    logger.info("All tasks cleared (%d).", n)
    return "Task list is empty."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add", cmd_add, help_text="Add a task: /add title | description | YYYY-MM-DD.", aliases=["a"]
)
registry.register(
    "list", cmd_list, help_text="List tasks: /list [title | due | insertion].", aliases=["ls", "l"]
)
registry.register(
    "remove", cmd_remove, help_text="Remove a task by id prefix: /remove <id>.", aliases=["rm"]
)
registry.register("sort", cmd_sort, help_text="Set list order: /sort title | due | insertion.")
registry.register("status", cmd_status, help_text="Show task count and current settings.")
registry.register("clear", cmd_clear, help_text="Remove all tasks.")
