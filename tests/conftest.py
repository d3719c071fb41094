# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskapp.cli.bootstrap import create_initial_state
from taskapp.core.state import AppState
from taskapp.history.log_store import LogStore
from taskapp.tasks.task_store import TaskStore
from taskapp.users.user_models import User
from taskapp.users.user_store import UserStore

LOAD_DAY = date(2026, 10, 19)

USERS_CSV = (
    "Code,Name,Email,Password\n"
    "1,Suzuki Ichiro,ichiro@example.com,pass1\n"
    "2,Sato Hanako,hanako@example.com,pass2\n"
    "3,Tanaka Jiro,jiro@example.com,pass3\n"
)


def write_lines(path: Path, *lines: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def read_lines(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap code.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskapp-test",
        log_level="INFO",
        log_dir=tmp_path / "logs",
        data_dir=data_dir,
        users_path=data_dir / "users.csv",
        tasks_path=data_dir / "tasks.csv",
        logs_path=data_dir / "logs.csv",
    )


@pytest.fixture()
def users_file(settings: SimpleNamespace) -> Path:
    path: Path = settings.users_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(USERS_CSV, encoding="utf-8")
    return path


@pytest.fixture()
def user_store(users_file: Path) -> UserStore:
    return UserStore(users_file)


@pytest.fixture()
def task_store(settings: SimpleNamespace, user_store: UserStore) -> TaskStore:
    return TaskStore(settings.tasks_path, user_store)


@pytest.fixture()
def log_store(settings: SimpleNamespace) -> LogStore:
    return LogStore(settings.logs_path, today=lambda: LOAD_DAY)


@pytest.fixture()
def ichiro(user_store: UserStore) -> User:
    user = user_store.find_by_code(1)
    assert user is not None
    return user


@pytest.fixture()
def hanako(user_store: UserStore) -> User:
    user = user_store.find_by_code(2)
    assert user is not None
    return user


@pytest.fixture()
def state(settings: SimpleNamespace, users_file: Path) -> AppState:
    """AppState wired with real file stores under tmp_path."""
    return create_initial_state(settings=settings)
