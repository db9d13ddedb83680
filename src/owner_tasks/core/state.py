# src/owner_tasks/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskRepo

    # Caller identity for the console session (switched with /as).
    owner_id: str = "local"

    # Serializes command handling when several connectors share the state.
    lock: threading.Lock = field(default_factory=threading.Lock)
