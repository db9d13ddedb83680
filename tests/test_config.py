# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from owner_tasks.cli.bootstrap import create_initial_state
from owner_tasks.config import Settings
from owner_tasks.tasks.sqlite_store import SQLiteTaskStore
from owner_tasks.tasks.task_store import TaskStore


def test_settings_defaults(monkeypatch) -> None:
    for suffix in ("APP_NAME", "LOG_LEVEL", "BACKEND", "DATA_DIR", "DB_PATH", "VALIDATE", "DEFAULT_OWNER"):
        monkeypatch.delenv(f"OWNER_TASKS_{suffix}", raising=False)

    s = Settings.from_env()
    assert s.app_name == "owner-tasks"
    assert s.backend == "memory"
    assert s.data_dir == Path(".local/owner_tasks")
    assert s.tasks_db_path == Path(".local/owner_tasks/tasks.sqlite3")
    assert s.validate_tasks is False
    assert s.default_owner == "local"


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("OWNER_TASKS_BACKEND", "SQLite")
    monkeypatch.setenv("OWNER_TASKS_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("OWNER_TASKS_DB_PATH", raising=False)
    monkeypatch.setenv("OWNER_TASKS_VALIDATE", "yes")
    monkeypatch.setenv("OWNER_TASKS_DEFAULT_OWNER", "alice")

    s = Settings.from_env()
    assert s.backend == "sqlite"
    assert s.tasks_db_path == tmp_path / "tasks.sqlite3"
    assert s.validate_tasks is True
    assert s.default_owner == "alice"


def test_unknown_backend_falls_back_to_memory(monkeypatch) -> None:
    monkeypatch.setenv("OWNER_TASKS_BACKEND", "redis")
    assert Settings.from_env().backend == "memory"


def test_bootstrap_picks_backend(settings) -> None:
    state = create_initial_state(settings=settings)
    assert isinstance(state.task_store, TaskStore)
    assert state.owner_id == "u1"

    settings.backend = "sqlite"
    state = create_initial_state(settings=settings)
    assert isinstance(state.task_store, SQLiteTaskStore)
    assert state.task_store.db_path == settings.tasks_db_path
    assert settings.tasks_db_path.exists()
