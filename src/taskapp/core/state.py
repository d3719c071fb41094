# src/taskapp/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..history.log_store import LogStore
from ..tasks.task_service import TaskService
from ..tasks.task_store import TaskStore
from ..users.user_models import User
from ..users.user_store import UserStore


@dataclass
class AppState:
    # Settings object kept on the state so front-end code can read display options.
    settings: object

    users: UserStore
    tasks: TaskStore
    logs: LogStore
    service: TaskService

    current_user: User | None = None
