# src/owner_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every variable has a default.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "OWNER_TASKS"

BACKEND_MEMORY = "memory"
BACKEND_SQLITE = "sqlite"
BACKENDS = (BACKEND_MEMORY, BACKEND_SQLITE)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Storage ----
    backend: str
    data_dir: Path
    tasks_db_path: Path
    validate_tasks: bool

    # ---- Console ----
    default_owner: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "owner-tasks").strip() or "owner-tasks"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        backend = _env(_k("BACKEND"), BACKEND_MEMORY).strip().lower()
        if backend not in BACKENDS:
            logger.warning("Unknown backend %r, falling back to %s.", backend, BACKEND_MEMORY)
            backend = BACKEND_MEMORY

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/owner_tasks"))
        tasks_db_path = _env_path(_k("DB_PATH"), data_dir / "tasks.sqlite3")
        validate_tasks = _env_bool(_k("VALIDATE"), False)

        default_owner = _env(_k("DEFAULT_OWNER"), "local").strip() or "local"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            backend=backend,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            validate_tasks=validate_tasks,
            default_owner=default_owner,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load .env (once) and build Settings on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
