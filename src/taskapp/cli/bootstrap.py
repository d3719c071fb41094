# src/taskapp/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- makes sure the data directory and the task/log record files exist,
- wires the stores and the service into AppState.

The user file is only ever read. A missing user file is reported, never created.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..history.log_store import LogStore
from ..tasks.task_service import TaskService
from ..tasks.task_store import TaskStore
from ..users.user_store import UserStore

logger = logging.getLogger(__name__)


def _ensure_local_files(settings, tasks: TaskStore, logs: LogStore) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    tasks.ensure_file()
    logs.ensure_file()
    if not settings.users_path.is_file():
        logger.warning("User file %s not found; nobody will be able to log in.", settings.users_path)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    users = UserStore(settings.users_path)
    tasks = TaskStore(settings.tasks_path, users)
    logs = LogStore(settings.logs_path)

    _ensure_local_files(settings, tasks, logs)

    state = AppState(
        settings=settings,
        users=users,
        tasks=tasks,
        logs=logs,
        service=TaskService(tasks, logs, users),
    )
    logger.info(
        "State ready users=%s tasks=%s logs=%s",
        settings.users_path,
        settings.tasks_path,
        settings.logs_path,
    )
    return state
