# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from owner_tasks.cli import main as cli_main
from owner_tasks.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_logs_only() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("owner_tasks.tasks.task_store", logging.DEBUG))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs")
    logging.getLogger("owner_tasks.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert log_file == tmp_path / "logs" / "owner_tasks.log"
    assert "hello file" in log_file.read_text("utf-8")


def test_main_builds_state_from_settings(settings, monkeypatch, restore_root_logging) -> None:
    seen = {}

    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "run_console_loop", lambda state: seen.setdefault("state", state))

    cli_main.main()

    state = seen["state"]
    assert state.owner_id == "u1"
    assert state.task_store.list_tasks("u1") == []
    assert (settings.data_dir / "owner_tasks.log").exists()
