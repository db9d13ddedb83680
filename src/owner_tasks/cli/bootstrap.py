# src/owner_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- builds the single shared task store and wires it into AppState.
"""

from __future__ import annotations

import logging

from ..config import BACKEND_SQLITE, get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.sqlite_store import SQLiteTaskStore
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    if settings.backend == BACKEND_SQLITE:
        settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_task_store(settings) -> TaskRepo:
    validate = bool(getattr(settings, "validate_tasks", False))
    if settings.backend == BACKEND_SQLITE:
        return SQLiteTaskStore(settings.tasks_db_path, validate=validate)
    return TaskStore(validate=validate)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    state = AppState(
        settings=settings,
        task_store=create_task_store(settings),
        owner_id=str(getattr(settings, "default_owner", "local")),
    )
    logger.info("State ready backend=%s owner=%s", settings.backend, state.owner_id)
    return state
