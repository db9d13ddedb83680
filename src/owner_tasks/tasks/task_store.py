# src/owner_tasks/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Hashable, Iterator
from typing import Any

from ..errors import InvalidTaskError
from .task_models import Task

logger = logging.getLogger(__name__)

_ALL: Any = object()


class _OwnerLock:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class TaskStore:
    """
    In-memory per-owner task store.

    Layout:
    - owner -> tuple[Task, ...], insertion ordered
    - an owner that was never touched has no entry; so does an owner whose
      last task was removed. Absent and empty look the same from outside.

    Thread-safety:
    - one lock per owner, registered under a guard only while a mutation
      uses it and dropped again when its last user leaves
    - mutations copy the tuple, modify the copy, and swap it in under the
      owner's lock; readers grab whatever tuple is current
    """

    def __init__(self, *, validate: bool = False) -> None:
        self._validate = validate
        self._tasks: dict[Hashable, tuple[Task, ...]] = {}
        self._locks: dict[Hashable, _OwnerLock] = {}
        self._locks_guard = threading.Lock()
        logger.info("TaskStore ready backend=memory validate=%s", validate)

    def close(self) -> None:
        """Compatibility hook for shutdown (nothing to release)."""
        return

    # ---- low-level helpers ----

    @contextlib.contextmanager
    def _owner_lock(self, owner: Hashable) -> Iterator[None]:
        with self._locks_guard:
            entry = self._locks.get(owner)
            if entry is None:
                entry = _OwnerLock()
                self._locks[owner] = entry
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._locks_guard:
                entry.users -= 1
                if entry.users == 0:
                    del self._locks[owner]

    def _snapshot(self, owner: Hashable) -> tuple[Task, ...]:
        return self._tasks.get(owner, ())

    def _check(self, task: Task) -> None:
        if not self._validate:
            return
        if not task.title or not task.title.strip():
            raise InvalidTaskError("title is required")

    # ---- public API ----

    def add_task(self, owner: Hashable, task: Task) -> None:
        self._check(task)
        with self._owner_lock(owner):
            self._tasks[owner] = self._snapshot(owner) + (task,)
        logger.debug("Task added owner=%s title=%r state=%s", owner, task.title, task.state.value)

    def remove_task(self, owner: Hashable, title: str) -> bool:
        """
        Remove the first task of `owner` whose title equals `title`.

        Returns True if a task was removed. No match (or no tasks at all)
        leaves the collection untouched.
        """
        if owner not in self._tasks:
            logger.debug("Task not found owner=%s title=%r (no tasks)", owner, title)
            return False

        with self._owner_lock(owner):
            current = self._snapshot(owner)
            idx = next((i for i, t in enumerate(current) if t.title == title), None)
            if idx is None:
                logger.debug("Task not found owner=%s title=%r", owner, title)
                return False

            remaining = current[:idx] + current[idx + 1 :]
            if remaining:
                self._tasks[owner] = remaining
            else:
                self._tasks.pop(owner, None)

        logger.debug("Task removed owner=%s title=%r index=%d", owner, title, idx)
        return True

    def list_tasks(self, owner: Hashable) -> list[Task]:
        return list(self._snapshot(owner))

    def count_tasks(self, owner: Hashable = _ALL) -> int:
        """Tasks of one owner, or of the whole store when no owner is given."""
        if owner is not _ALL:
            return len(self._snapshot(owner))
        return sum(len(v) for v in list(self._tasks.values()))
