# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "OWNER_TASKS_APP_NAME": "App display name (default: owner-tasks).",
    "OWNER_TASKS_LOG_LEVEL": "Console logging level (default: INFO).",
    # Storage
    "OWNER_TASKS_BACKEND": "Task store backend: memory | sqlite (default: memory).",
    "OWNER_TASKS_DATA_DIR": "Local data + log directory (default: .local/owner_tasks).",
    "OWNER_TASKS_DB_PATH": "SQLite path (default: <data_dir>/tasks.sqlite3).",
    "OWNER_TASKS_VALIDATE": "Reject tasks with an empty title in the store (true/false).",
    # Console
    "OWNER_TASKS_DEFAULT_OWNER": "Owner the console session starts as (default: local).",
}
