# tests/test_console_connector.py

from __future__ import annotations

from owner_tasks.cli import commands
from owner_tasks.connectors.console_connector import run_console_loop
from owner_tasks.tasks.task_models import Task

from .fakes import ScriptedConsole


def test_console_runs_commands_until_exit(state) -> None:
    console = ScriptedConsole(["/add one", "", "/add two", "/exit", "/add never"])
    run_console_loop(state, input_fn=console.read, output_fn=console.write)

    assert [t.title for t in state.task_store.list_tasks("u1")] == ["one", "two"]
    assert console.lines == ["/add never"]
    assert console.prompts[0] == "u1> "


def test_console_stops_on_eof_and_handles_plain_text(state) -> None:
    console = ScriptedConsole(["hello"])
    run_console_loop(state, input_fn=console.read, output_fn=console.write)
    assert "Not a command" in console.joined()


def test_console_survives_crashing_handler(state, monkeypatch) -> None:
    def boom(state, args):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "add", boom)
    console = ScriptedConsole(["/add x", "/list"])
    run_console_loop(state, input_fn=console.read, output_fn=console.write)

    out = console.joined()
    assert "Internal error" in out
    assert "No tasks for u1" in out
    assert state.task_store.list_tasks("u1") == []


def test_prompt_follows_owner_switch(state) -> None:
    console = ScriptedConsole(["/as u9", "/add z"])
    run_console_loop(state, input_fn=console.read, output_fn=console.write)
    assert console.prompts[:2] == ["u1> ", "u9> "]
    assert state.task_store.list_tasks("u9") == [Task("z", "")]
