# src/taskapp/history/log_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from pathlib import Path

from ..core.errors import RecordFileMissing, StorageError, UnsupportedOperationError
from ..storage.record_file import Outcome, RecordFile
from ..tasks.task_models import TaskStatus
from .log_models import LOG_HEADER, LogEntry

logger = logging.getLogger(__name__)


class LogStore:
    """
    Append-only log of task creations and status changes.

    Notes:
    - save() is a logical append but a physical rewrite (read all, write
      header + old entries + new entry). Not safe against concurrent writers.
    - On load, every entry's change_date is the current date, NOT the persisted
      one. The persisted column is written but never read back.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._file = RecordFile(path, LOG_HEADER)
        self._today = today

    @property
    def path(self) -> Path:
        return self._file.path

    def ensure_file(self) -> Outcome[bool]:
        """Create a header-only log file if missing. value is True if it was created."""
        try:
            return Outcome(self._file.ensure_exists())
        except StorageError as e:
            logger.exception("Could not create log file %s", self._file.path)
            return Outcome(False, e)

    def _parse(self, fields: list[str]) -> LogEntry:
        return LogEntry(
            task_code=int(fields[0]),
            change_user_code=int(fields[1]),
            status=TaskStatus.from_record(fields[2]),
            change_date=self._today(),
        )

    # ---- public API ----

    def load(self) -> Outcome[list[LogEntry]]:
        try:
            return Outcome(self._file.read_records(self._parse))
        except RecordFileMissing as e:
            logger.warning("Log file missing, treating as empty: %s", e.path)
            return Outcome([], e)
        except StorageError as e:
            logger.exception("Failed to load log entries from %s", self._file.path)
            return Outcome([], e)

    def find_all(self) -> list[LogEntry]:
        return self.load().value

    def find_by_task_code(self, task_code: int) -> list[LogEntry]:
        return [e for e in self.find_all() if e.task_code == task_code]

    def save(self, entry: LogEntry) -> Outcome[int]:
        """Append one entry. Returns the number of entries now stored (0 on failure)."""
        loaded = self.load()
        if loaded.error is not None and not isinstance(loaded.error, RecordFileMissing):
            logger.error("Log entry not saved, existing log unreadable: %s", loaded.error)
            return Outcome(0, loaded.error)

        records = [e.to_fields() for e in loaded.value]
        records.append(entry.to_fields())
        try:
            n = self._file.write_records(records)
        except StorageError as e:
            logger.exception("Failed to save log entry task=%s", entry.task_code)
            return Outcome(0, e)

        logger.debug(
            "Log entry saved task=%s user=%s status=%s",
            entry.task_code,
            entry.change_user_code,
            int(entry.status),
        )
        return Outcome(n)

    def delete_by_task_code(self, task_code: int) -> None:
        raise UnsupportedOperationError("deleting log entries is not supported")
