# src/owner_tasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ..errors import InvalidTaskState


class TaskState(StrEnum):
    """
    Task state.

    Notes:
    - caller-supplied and opaque to the stores (no transitions are enforced)
    - values are the wire names used across the call boundary
    """

    TODO = "Todo"
    WIP = "Wip"
    DONE = "Done"

    @classmethod
    def parse(cls, raw: str | TaskState) -> TaskState:
        if isinstance(raw, cls):
            return raw
        key = str(raw or "").strip().lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        raise InvalidTaskState(raw)

    @classmethod
    def from_db(cls, raw: str | None) -> TaskState:
        if not raw:
            return cls.TODO
        try:
            return cls.parse(raw)
        except InvalidTaskState:
            return cls.TODO


@dataclass(frozen=True, slots=True)
class Task:
    title: str
    description: str
    state: TaskState = TaskState.TODO

    def to_dict(self) -> dict[str, str]:
        return {
            "title": self.title,
            "description": self.description,
            "state": self.state.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        return cls(
            title=str(data.get("title", "")),
            description=str(data.get("description", "")),
            state=TaskState.parse(data.get("state", TaskState.TODO)),
        )
