# src/taskapp/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from ..users.user_models import User

TASK_HEADER = ("Code", "Name", "Status", "Rep_User_Code")


class TaskStatus(IntEnum):
    """
    Task lifecycle status, stored as its integer value.

    Only forward single steps are legal: UNSTARTED -> IN_PROGRESS -> DONE.
    """

    UNSTARTED = 0
    IN_PROGRESS = 1
    DONE = 2

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]

    @classmethod
    def from_record(cls, raw: str | int) -> TaskStatus:
        """Parse a stored status. Raises ValueError for anything outside 0/1/2."""
        return cls(int(raw))

    def next(self) -> TaskStatus | None:
        if self is TaskStatus.DONE:
            return None
        return TaskStatus(self + 1)


_STATUS_LABELS = {
    TaskStatus.UNSTARTED: "not started",
    TaskStatus.IN_PROGRESS: "in progress",
    TaskStatus.DONE: "done",
}


@dataclass(frozen=True, slots=True)
class Task:
    code: int
    name: str
    status: TaskStatus
    responsible_user_code: int
    # Resolved from responsible_user_code when loaded; None if the code no longer resolves.
    responsible_user: User | None = None

    def to_fields(self) -> tuple[int, str, int, int]:
        return (self.code, self.name, int(self.status), self.responsible_user_code)


@dataclass(frozen=True, slots=True)
class TaskRow:
    """One line of the task listing, as seen by the logged-in user."""

    code: int
    name: str
    status: TaskStatus
    is_mine: bool
    responsible_user_name: str | None

    @property
    def status_label(self) -> str:
        return self.status.label

    @property
    def assignee_label(self) -> str:
        if self.is_mine:
            return "you are responsible"
        if self.responsible_user_name is None:
            return "unassigned"
        return f"assigned to {self.responsible_user_name}"
