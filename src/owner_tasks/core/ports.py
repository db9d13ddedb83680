# src/owner_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on the TaskRepo Protocol instead of a concrete store, so the
in-memory and SQLite backends are interchangeable (and easy to fake in tests).
"""

from collections.abc import Hashable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def add_task(self, owner: Hashable, task: Task) -> None: ...
    def remove_task(self, owner: Hashable, title: str) -> bool: ...
    def list_tasks(self, owner: Hashable) -> list[Task]: ...

    # Diagnostics / lifecycle
    def count_tasks(self, owner: Hashable = ...) -> int: ...
    def close(self) -> None: ...
