# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from taskapp.core.errors import StorageError, UnsupportedOperationError
from taskapp.history.log_models import LogEntry
from taskapp.storage.record_file import Outcome
from taskapp.tasks.task_models import Task
from taskapp.users.user_models import User


class FakeUserRepo:
    def __init__(self, users: list[User]) -> None:
        self.users = list(users)

    def find_by_code(self, code: int) -> User | None:
        found = None
        for u in self.users:
            if u.code == code:
                found = u
        return found

    def find_by_credentials(self, email: str, password: str) -> User | None:
        found = None
        for u in self.users:
            if u.email == email and u.password == password:
                found = u
        return found


@dataclass
class FakeTaskRepo:
    """
    In-memory TaskRepo.

    Set `fail_writes` to make save/update report a storage failure without
    touching the stored list.
    """

    tasks: list[Task] = field(default_factory=list)
    fail_writes: bool = False

    def find_all(self) -> list[Task]:
        return list(self.tasks)

    def find_by_code(self, code: int) -> Task | None:
        found = None
        for t in self.tasks:
            if t.code == code:
                found = t
        return found

    def save(self, task: Task) -> Outcome[int]:
        if self.fail_writes:
            return Outcome(0, StorageError("tasks.csv", "disk full"))
        self.tasks.append(task)
        return Outcome(len(self.tasks))

    def update(self, updated: Task) -> Outcome[int]:
        if self.fail_writes:
            return Outcome(0, StorageError("tasks.csv", "disk full"))
        self.tasks = [updated if t.code == updated.code else t for t in self.tasks]
        return Outcome(len(self.tasks))

    def delete(self, code: int) -> None:
        raise UnsupportedOperationError("deleting tasks is not supported")


@dataclass
class FakeLogRepo:
    entries: list[LogEntry] = field(default_factory=list)

    def find_all(self) -> list[LogEntry]:
        return list(self.entries)

    def find_by_task_code(self, task_code: int) -> list[LogEntry]:
        return [e for e in self.entries if e.task_code == task_code]

    def save(self, entry: LogEntry) -> Outcome[int]:
        self.entries.append(entry)
        return Outcome(len(self.entries))

    def delete_by_task_code(self, task_code: int) -> None:
        raise UnsupportedOperationError("deleting log entries is not supported")
