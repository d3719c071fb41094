# tests/test_bootstrap.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

from taskapp.cli.bootstrap import create_initial_state
from taskapp.cli.commands import registry
from taskapp.core.errors import StorageError

from .conftest import read_lines


def test_bootstrap_creates_task_and_log_files(settings: SimpleNamespace, users_file: Path) -> None:
    state = create_initial_state(settings=settings)

    assert read_lines(settings.tasks_path) == ["Code,Name,Status,Rep_User_Code"]
    assert read_lines(settings.logs_path) == ["Task_Code,Change_User_Code,Status,Change_Date"]
    assert read_lines(settings.users_path)[0] == "Code,Name,Email,Password"
    assert state.tasks.ensure_file().value is False


def test_unwritable_task_file_degrades_at_startup(
    settings: SimpleNamespace, users_file: Path
) -> None:
    settings.tasks_path.mkdir(parents=True)

    state = create_initial_state(settings=settings)

    created = state.tasks.ensure_file()
    assert not created.ok
    assert isinstance(created.error, StorageError)
    assert not list(settings.data_dir.glob("*.tmp"))
    assert state.tasks.find_all() == []

    state.current_user = state.users.find_by_code(1)
    assert registry.handle(state, "/list") == "No tasks."
