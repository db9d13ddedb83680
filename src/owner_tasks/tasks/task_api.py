# src/owner_tasks/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.state import AppState
from ..errors import InvalidTaskError
from .task_models import Task, TaskState

logger = logging.getLogger(__name__)


def build_task(title: str, description: str = "", state: str | TaskState = TaskState.TODO) -> Task:
    """
    Build a Task from loose user input.

    Raises InvalidTaskError for an empty title and InvalidTaskState for an
    unknown state name.
    """
    title = (title or "").strip()
    if not title:
        raise InvalidTaskError("title is required")
    return Task(title=title, description=(description or "").strip(), state=TaskState.parse(state))


def add_for_current_owner(state: AppState, task: Task) -> int:
    """Add `task` for the session owner and return the owner's new task count."""
    state.task_store.add_task(state.owner_id, task)
    return state.task_store.count_tasks(state.owner_id)


def format_tasks(owner_id: str, tasks: list[Task]) -> str:
    if not tasks:
        return f"No tasks for {owner_id}."
    lines = [f"Tasks for {owner_id}:"]
    for i, t in enumerate(tasks, start=1):
        desc = f" - {t.description}" if t.description else ""
        lines.append(f"{i}. [{t.state.value}] {t.title}{desc}")
    return "\n".join(lines)
