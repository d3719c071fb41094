# src/taskapp/tasks/task_service.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..core.errors import UnsupportedOperationError, ValidationError
from ..core.ports import LogRepo, TaskRepo, UserRepo
from ..history.log_models import LogEntry
from ..storage.record_file import Outcome
from ..users.user_models import User
from .task_models import Task, TaskRow, TaskStatus

logger = logging.getLogger(__name__)

MSG_UNKNOWN_USER = "user code must refer to an existing user"
MSG_UNKNOWN_TASK = "task code must refer to an existing task"
MSG_BAD_TRANSITION = "new status must be exactly one step ahead of current status"


class TaskService:
    """
    Validated task operations on top of the task, log and user stores.

    Every successful create/status change writes the task first, then appends
    one LogEntry. Domain rule violations raise ValidationError before anything
    is written. Storage failures are logged by the stores and do not raise here;
    create/change_status return an Outcome whose error is set when the task
    was not persisted.
    """

    def __init__(
        self,
        tasks: TaskRepo,
        logs: LogRepo,
        users: UserRepo,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._tasks = tasks
        self._logs = logs
        self._users = users
        self._today = today

    def list_all(self, current_user: User) -> list[TaskRow]:
        rows: list[TaskRow] = []
        for task in self._tasks.find_all():
            owner = task.responsible_user
            rows.append(
                TaskRow(
                    code=task.code,
                    name=task.name,
                    status=task.status,
                    is_mine=owner is not None and owner.code == current_user.code,
                    responsible_user_name=owner.name if owner is not None else None,
                )
            )
        return rows

    def create(
        self,
        code: int,
        name: str,
        responsible_user_code: int,
        current_user: User,
    ) -> Outcome[Task]:
        """
        Create a task in status UNSTARTED and log its creation.

        The code is not checked for uniqueness; a duplicate shadows the earlier
        record on lookup.
        """
        owner = self._users.find_by_code(responsible_user_code)
        if owner is None:
            raise ValidationError(MSG_UNKNOWN_USER)

        task = Task(
            code=code,
            name=name,
            status=TaskStatus.UNSTARTED,
            responsible_user_code=owner.code,
            responsible_user=owner,
        )
        saved = self._tasks.save(task)
        if not saved.ok:
            logger.error("Task code=%s was not persisted; creation not logged", code)
            return Outcome(task, saved.error)

        self._append_log(code, responsible_user_code, TaskStatus.UNSTARTED)
        logger.info(
            "Task created code=%s owner=%s by user=%s", code, owner.code, current_user.code
        )
        return Outcome(task)

    def change_status(
        self, code: int, new_status: int, current_user: User
    ) -> Outcome[Task]:
        task = self._tasks.find_by_code(code)
        if task is None:
            raise ValidationError(MSG_UNKNOWN_TASK)

        target = task.status.next()
        if target is None or new_status != int(target):
            raise ValidationError(MSG_BAD_TRANSITION)

        updated = Task(
            code=task.code,
            name=task.name,
            status=target,
            responsible_user_code=task.responsible_user_code,
            responsible_user=task.responsible_user,
        )
        saved = self._tasks.update(updated)
        if not saved.ok:
            logger.error("Task code=%s status change was not persisted; not logged", code)
            return Outcome(updated, saved.error)

        self._append_log(code, current_user.code, target)
        logger.info(
            "Task status changed code=%s %s -> %s by user=%s",
            code,
            task.status.label,
            target.label,
            current_user.code,
        )
        return Outcome(updated)

    def history(self, code: int) -> list[LogEntry]:
        return self._logs.find_by_task_code(code)

    def delete(self, code: int, current_user: User) -> None:
        raise UnsupportedOperationError("deleting tasks is not supported")

    def _append_log(self, task_code: int, user_code: int, status: TaskStatus) -> None:
        entry = LogEntry(
            task_code=task_code,
            change_user_code=user_code,
            status=status,
            change_date=self._today(),
        )
        self._logs.save(entry)
