# src/taskapp/history/log_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..tasks.task_models import TaskStatus

LOG_HEADER = ("Task_Code", "Change_User_Code", "Status", "Change_Date")


@dataclass(frozen=True, slots=True)
class LogEntry:
    task_code: int
    change_user_code: int
    status: TaskStatus
    change_date: date

    def to_fields(self) -> tuple[int, int, int, str]:
        return (
            self.task_code,
            self.change_user_code,
            int(self.status),
            self.change_date.isoformat(),
        )
