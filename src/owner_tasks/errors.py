# src/owner_tasks/errors.py

"""Exceptions raised by owner_tasks."""

from __future__ import annotations


class OwnerTasksError(Exception):
    """Base class for package errors."""


class InvalidTaskError(OwnerTasksError, ValueError):
    """Raised by a validating store when a task is malformed (e.g. empty title)."""


class InvalidTaskState(OwnerTasksError, ValueError):
    """Raised when a state name is not one of Todo / Wip / Done."""

    def __init__(self, raw: object) -> None:
        super().__init__(f"Unknown task state: {raw!r} (expected Todo, Wip or Done)")
        self.raw = raw
