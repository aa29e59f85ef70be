# src/task_manager/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Loggers whose INFO lines repeat what the command reply already printed.
_ECHOED_BY_REPLY = (
    "task_manager.tasks.",
    "task_manager.cli.commands",
)


class _ConsoleNoiseFilter(logging.Filter):
    """
    Log lines share the terminal with the REPL prompt:
    - task/command logs reach the console only at WARNING+ (the reply already says it)
    - other task_manager logs (startup, shutdown, connector) pass through
    - everything else, including 'py.warnings', only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name.startswith(_ECHOED_BY_REPLY):
            return record.levelno >= logging.WARNING

        if name.startswith("task_manager."):
            return True

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_file: str | Path,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Configure logging with:
    - Console handler (stderr): filtered so it does not bury the REPL output
    - File handler: full task history (every add/remove at DEBUG)

    Call this ONCE, before the first logger.info. Returns the log file path.
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))

    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
