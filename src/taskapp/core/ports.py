# src/taskapp/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) between the service and the stores.

TaskService depends on these Protocols rather than on the concrete file stores,
so tests can swap in in-memory fakes.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..history.log_models import LogEntry
    from ..storage.record_file import Outcome
    from ..tasks.task_models import Task
    from ..users.user_models import User


class UserRepo(Protocol):
    def find_by_code(self, code: int) -> User | None: ...

    def find_by_credentials(self, email: str, password: str) -> User | None: ...


class TaskRepo(Protocol):
    def find_all(self) -> list[Task]: ...

    def find_by_code(self, code: int) -> Task | None: ...

    def save(self, task: Task) -> Outcome[int]: ...

    def update(self, updated: Task) -> Outcome[int]: ...

    def delete(self, code: int) -> None: ...


class LogRepo(Protocol):
    def find_all(self) -> list[LogEntry]: ...

    def find_by_task_code(self, task_code: int) -> list[LogEntry]: ...

    def save(self, entry: LogEntry) -> Outcome[int]: ...

    def delete_by_task_code(self, task_code: int) -> None: ...
