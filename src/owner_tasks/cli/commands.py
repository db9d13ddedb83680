# src/owner_tasks/cli/commands.py

from __future__ import annotations

import inspect
import logging
import shlex
from collections.abc import Callable
from typing import cast

from ..config import BACKEND_MEMORY, BACKEND_SQLITE
from ..core.state import AppState
from ..errors import InvalidTaskError, InvalidTaskState
from ..tasks.task_api import add_for_current_owner, build_task, format_tasks

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Could not parse command: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    backend = getattr(state.settings, "backend", BACKEND_MEMORY)
    lines = [
        "Status:",
        f"  Backend: {backend}",
    ]
    if backend == BACKEND_SQLITE:
        lines.append(f"  Database: {getattr(state.settings, 'tasks_db_path', '?')}")
    lines.append(f"  Owner: {state.owner_id}")
    lines.append(f"  Total tasks: {state.task_store.count_tasks()}")
    return "\n".join(lines)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title>                       -> Todo task, empty description
    /add <title> <description>         -> Todo task
    /add <title> <description> <state> -> state is Todo | Wip | Done
    """
    if not args:
        return 'Usage: /add <title> [description] [Todo|Wip|Done]. Quote titles with spaces: /add "Buy milk" 2%'

    title = args[0]
    description = args[1] if len(args) > 1 else ""
    raw_state = args[2] if len(args) > 2 else "Todo"

    try:
        task = build_task(title, description, raw_state)
    except (InvalidTaskError, InvalidTaskState) as e:
        return f"Cannot add task: {e}."

    total = add_for_current_owner(state, task)
    logger.debug("Command /add owner=%s title=%r", state.owner_id, task.title)
    return f"Added [{task.state.value}] {task.title} for {state.owner_id} ({total} total)."


def cmd_remove(state: AppState, args: list[str]) -> str:
    # Same tokenizing as /add: one argument is one title.
    if len(args) != 1:
        return 'Usage: /remove <title>. Quote titles with spaces: /remove "Buy milk"'

    title = args[0]
    if state.task_store.remove_task(state.owner_id, title):
        return f"Removed {title} for {state.owner_id}."
    return f"No task titled {title} for {state.owner_id}."


def cmd_list(state: AppState, args: list[str]) -> str:
    owner_id = args[0] if args else state.owner_id
    return format_tasks(owner_id, state.task_store.list_tasks(owner_id))


def cmd_as(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if not args or not args[0].strip():
        return "Usage: /as <owner>."

    previous = state.owner_id
    state.owner_id = args[0].strip()
    logger.info("Owner switched %s -> %s", previous, state.owner_id)
    if emit is not None:
        emit(f"[OWNER] {previous} -> {state.owner_id}")
    return f"Now acting as {state.owner_id}."


def cmd_whoami(state: AppState, args: list[str]) -> str:
    return f"You are {state.owner_id}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show backend and task totals.")
registry.register("add", cmd_add, help_text="Add a task: /add <title> [description] [Todo|Wip|Done].")
registry.register("remove", cmd_remove, help_text="Remove the first task with this title: /remove <title>.", aliases=["rm"])
registry.register("list", cmd_list, help_text="List tasks: /list [owner].", aliases=["ls"])
registry.register("as", cmd_as, help_text="Switch the current owner: /as <owner>.")
registry.register("whoami", cmd_whoami, help_text="Show the current owner.")
