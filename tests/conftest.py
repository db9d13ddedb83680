# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from owner_tasks.core.state import AppState
from owner_tasks.tasks.sqlite_store import SQLiteTaskStore
from owner_tasks.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="owner-tasks-test",
        log_level="DEBUG",
        backend="memory",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        validate_tasks=False,
        default_owner="u1",
    )


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path: Path):
    """Every store contract test runs against both backends."""
    if request.param == "sqlite":
        return SQLiteTaskStore(tmp_path / "tasks.sqlite3")
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(settings=settings, task_store=TaskStore(), owner_id=settings.default_owner)
