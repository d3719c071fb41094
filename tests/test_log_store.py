# tests/test_log_store.py

from __future__ import annotations

from datetime import date

import pytest

from taskapp.core.errors import MalformedRecord, UnsupportedOperationError
from taskapp.history.log_models import LogEntry
from taskapp.history.log_store import LogStore
from taskapp.tasks.task_models import TaskStatus

from .conftest import LOAD_DAY, read_lines, write_lines


def _entry(task_code: int, user_code: int, status: TaskStatus) -> LogEntry:
    return LogEntry(task_code, user_code, status, date(2026, 10, 1))


def test_save_creates_missing_file(log_store: LogStore) -> None:
    out = log_store.save(_entry(5, 1, TaskStatus.UNSTARTED))

    assert out.ok
    assert out.value == 1
    assert read_lines(log_store.path) == [
        "Task_Code,Change_User_Code,Status,Change_Date",
        "5,1,0,2026-10-01",
    ]


def test_save_appends_in_order(log_store: LogStore) -> None:
    log_store.save(_entry(5, 1, TaskStatus.UNSTARTED))
    log_store.save(_entry(5, 2, TaskStatus.IN_PROGRESS))
    log_store.save(_entry(6, 1, TaskStatus.UNSTARTED))

    entries = log_store.find_all()
    assert [(e.task_code, e.change_user_code, e.status) for e in entries] == [
        (5, 1, TaskStatus.UNSTARTED),
        (5, 2, TaskStatus.IN_PROGRESS),
        (6, 1, TaskStatus.UNSTARTED),
    ]


def test_loaded_dates_are_load_time_not_persisted(log_store: LogStore) -> None:
    write_lines(
        log_store.path,
        "Task_Code,Change_User_Code,Status,Change_Date",
        "1,1,0,2020-01-01",
        "1,2,1,2021-06-30",
    )

    entries = log_store.find_all()
    assert len(entries) == 2
    assert all(e.change_date == LOAD_DAY for e in entries)


def test_find_by_task_code(log_store: LogStore) -> None:
    log_store.save(_entry(5, 1, TaskStatus.UNSTARTED))
    log_store.save(_entry(6, 1, TaskStatus.UNSTARTED))
    log_store.save(_entry(5, 3, TaskStatus.IN_PROGRESS))

    trail = log_store.find_by_task_code(5)
    assert [e.status for e in trail] == [TaskStatus.UNSTARTED, TaskStatus.IN_PROGRESS]
    assert log_store.find_by_task_code(7) == []


def test_unreadable_log_is_not_overwritten(log_store: LogStore) -> None:
    write_lines(
        log_store.path,
        "Task_Code,Change_User_Code,Status,Change_Date",
        "1,1,9,2020-01-01",
    )
    before = read_lines(log_store.path)

    assert log_store.find_all() == []
    out = log_store.save(_entry(5, 1, TaskStatus.UNSTARTED))

    assert not out.ok
    assert isinstance(out.error, MalformedRecord)
    assert read_lines(log_store.path) == before


def test_delete_is_unsupported(log_store: LogStore) -> None:
    with pytest.raises(UnsupportedOperationError):
        log_store.delete_by_task_code(1)
