# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKMGR_APP_NAME": "App display name (default: task-manager).",
    "TASKMGR_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TASKMGR_DATA_DIR": "Local data directory for the log file (default: .local/task-manager).",
    # Task list
    "TASKMGR_DEFAULT_SORT": "Initial list order: insertion | title | due_date (default: insertion).",
    "TASKMGR_DATE_FORMAT": "strftime format for due dates in /list (default: %Y-%m-%d).",
    "TASKMGR_VALIDATE_ON_ADD": (
        "Log missing-field reasons when a task is added (true/false). Never blocks the add."
    ),
}
