# src/owner_tasks/tasks/sqlite_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from collections.abc import Hashable
from pathlib import Path
from typing import Any

from ..errors import InvalidTaskError
from .task_models import Task, TaskState

logger = logging.getLogger(__name__)

_ALL: Any = object()


class SQLiteTaskStore:
    """
    SQLite-backed per-owner task store.

    Same observable behaviour as the in-memory TaskStore; owners are stored
    as str(owner). Order within an owner is kept in the `position` column.

    The schema is migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Thread-safety:
    - each method opens its own SQLite connection
    - mutations run in BEGIN IMMEDIATE so position bookkeeping is serialized
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3", *, validate: bool = False) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._validate = validate
        self._ensure_schema()
        try:
            total = self.count_tasks()
        except sqlite3.Error:
            total = -1
        logger.info("TaskStore ready backend=sqlite db=%s total=%s", self._db_path, total)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        # isolation_level=None: transactions are opened explicitly below.
        conn = sqlite3.connect(str(self._db_path), timeout=30.0, isolation_level=None)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()

            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    owner_id TEXT NOT NULL,
                    position INTEGER NOT NULL DEFAULT 0,
                    title TEXT NOT NULL,
                    description TEXT NOT NULL DEFAULT '',
                    state TEXT NOT NULL DEFAULT 'Todo',
                    created_at REAL NOT NULL
                )
                """
            )

            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("position", "INTEGER NOT NULL DEFAULT 0")
            add_col("description", "TEXT NOT NULL DEFAULT ''")
            add_col("state", "TEXT NOT NULL DEFAULT 'Todo'")
            add_col("created_at", "REAL NOT NULL DEFAULT 0")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_owner_pos ON tasks(owner_id, position)")
        finally:
            conn.close()

    @staticmethod
    def _owner_key(owner: Hashable) -> str:
        return str(owner)

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            title=str(row["title"] or ""),
            description=str(row["description"] or ""),
            state=TaskState.from_db(row["state"]),
        )

    # ---- public API ----

    def count_tasks(self, owner: Hashable = _ALL) -> int:
        """Tasks of one owner, or of the whole store when no owner is given."""
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            if owner is _ALL:
                cur.execute("SELECT COUNT(*) FROM tasks")
            else:
                cur.execute("SELECT COUNT(*) FROM tasks WHERE owner_id = ?", (self._owner_key(owner),))
            (n,) = cur.fetchone()
            return int(n)
        finally:
            conn.close()

    def add_task(self, owner: Hashable, task: Task) -> None:
        if self._validate and (not task.title or not task.title.strip()):
            raise InvalidTaskError("title is required")

        key = self._owner_key(owner)
        conn = self._get_conn()
        try:
            conn.execute("BEGIN IMMEDIATE")
            try:
                (next_pos,) = conn.execute(
                    "SELECT COALESCE(MAX(position), -1) + 1 FROM tasks WHERE owner_id = ?",
                    (key,),
                ).fetchone()
                conn.execute(
                    """
                    INSERT INTO tasks(owner_id, position, title, description, state, created_at)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (key, int(next_pos), task.title, task.description, task.state.value, time.time()),
                )
            except BaseException:
                conn.execute("ROLLBACK")
                raise
            conn.execute("COMMIT")
            logger.debug(
                "Task added owner=%s title=%r state=%s position=%s",
                key,
                task.title,
                task.state.value,
                next_pos,
            )
        finally:
            conn.close()

    def remove_task(self, owner: Hashable, title: str) -> bool:
        """
        Remove the first task of `owner` (lowest position) whose title matches.

        Returns True if a row was deleted; no match is a silent no-op.
        """
        key = self._owner_key(owner)
        conn = self._get_conn()
        try:
            conn.execute("BEGIN IMMEDIATE")
            try:
                row = conn.execute(
                    """
                    SELECT id
                    FROM tasks
                    WHERE owner_id = ? AND title = ?
                    ORDER BY position ASC, id ASC
                        LIMIT 1
                    """,
                    (key, title),
                ).fetchone()
                if row is not None:
                    conn.execute("DELETE FROM tasks WHERE id = ?", (int(row["id"]),))
            except BaseException:
                conn.execute("ROLLBACK")
                raise
            conn.execute("COMMIT")
        finally:
            conn.close()

        if row is None:
            logger.debug("Task not found owner=%s title=%r", key, title)
            return False
        logger.debug("Task removed owner=%s title=%r id=%s", key, title, row["id"])
        return True

    def list_tasks(self, owner: Hashable) -> list[Task]:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                """
                SELECT title, description, state
                FROM tasks
                WHERE owner_id = ?
                ORDER BY position ASC, id ASC
                """,
                (self._owner_key(owner),),
            )
            return [self._row_to_task(r) for r in cur.fetchall()]
        finally:
            conn.close()
