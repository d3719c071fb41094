# src/taskapp/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..core.errors import RecordFileMissing, StorageError, UnsupportedOperationError
from ..core.ports import UserRepo
from ..storage.record_file import Outcome, RecordFile
from .task_models import TASK_HEADER, Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Task record file store.

    - Every responsible-user code is resolved through the user repo at load time.
      A code that does not resolve yields responsible_user=None, no error.
    - Lookups keep the LAST matching record (codes are not enforced unique).
    - save()/update() load everything, mutate in memory and rewrite the file.

    Failures are logged and reported through the returned Outcome; nothing here
    raises on I/O.
    """

    def __init__(self, path: str | Path, users: UserRepo) -> None:
        self._file = RecordFile(path, TASK_HEADER)
        self._users = users

    @property
    def path(self) -> Path:
        return self._file.path

    def ensure_file(self) -> Outcome[bool]:
        """Create a header-only task file if missing. value is True if it was created."""
        try:
            return Outcome(self._file.ensure_exists())
        except StorageError as e:
            logger.exception("Could not create task file %s", self._file.path)
            return Outcome(False, e)

    # ---- low-level helpers ----

    def _parse(self, fields: list[str]) -> Task:
        user_code = int(fields[3])
        return Task(
            code=int(fields[0]),
            name=fields[1],
            status=TaskStatus.from_record(fields[2]),
            responsible_user_code=user_code,
            responsible_user=self._users.find_by_code(user_code),
        )

    def _rewrite(self, op: str, build: Callable[[list[Task]], list[Task]]) -> Outcome[int]:
        loaded = self.load()
        if loaded.error is not None and not isinstance(loaded.error, RecordFileMissing):
            logger.error("Task %s skipped, existing tasks unreadable: %s", op, loaded.error)
            return Outcome(0, loaded.error)

        tasks = build(loaded.value)
        try:
            n = self._file.write_records(t.to_fields() for t in tasks)
        except StorageError as e:
            logger.exception("Task %s failed for %s", op, self._file.path)
            return Outcome(0, e)
        return Outcome(n)

    # ---- public API ----

    def load(self) -> Outcome[list[Task]]:
        try:
            return Outcome(self._file.read_records(self._parse))
        except RecordFileMissing as e:
            logger.warning("Task file missing, treating as empty: %s", e.path)
            return Outcome([], e)
        except StorageError as e:
            logger.exception("Failed to load tasks from %s", self._file.path)
            return Outcome([], e)

    def find_all(self) -> list[Task]:
        return self.load().value

    def lookup_by_code(self, code: int) -> Outcome[Task | None]:
        loaded = self.load()
        found: Task | None = None
        for task in loaded.value:
            if task.code == code:
                found = task
        return Outcome(found, loaded.error)

    def find_by_code(self, code: int) -> Task | None:
        return self.lookup_by_code(code).value

    def save(self, task: Task) -> Outcome[int]:
        """Append `task` after all stored tasks. Returns the number of tasks written."""
        out = self._rewrite("save", lambda tasks: [*tasks, task])
        if out.ok:
            logger.debug("Task saved code=%s total=%s", task.code, out.value)
        return out

    def update(self, updated: Task) -> Outcome[int]:
        """
        Replace, in place, every stored task whose code equals updated.code.

        Order of all records is preserved. If no record matches, the file is
        rewritten unchanged.
        """

        def build(tasks: list[Task]) -> list[Task]:
            return [updated if t.code == updated.code else t for t in tasks]

        out = self._rewrite("update", build)
        if out.ok:
            logger.debug("Task updated code=%s status=%s", updated.code, int(updated.status))
        return out

    def delete(self, code: int) -> None:
        raise UnsupportedOperationError("deleting tasks is not supported")
