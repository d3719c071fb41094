# src/taskapp/core/errors.py

"""
Error hierarchy.

Two tiers:
- ValidationError / UnsupportedOperationError: raised to the caller, who shows
  the message and lets the user retry.
- StorageError and subclasses: never raised out of a store. Stores catch them,
  log them and hand them back inside an Outcome while the value degrades to an
  empty/absent result.
"""

from __future__ import annotations

from pathlib import Path


class TaskAppError(Exception):
    """Base class for every error defined by taskapp."""


class ValidationError(TaskAppError):
    """A requested operation violates a domain rule (unknown code, bad transition)."""


class UnsupportedOperationError(TaskAppError, NotImplementedError):
    """The operation exists on the surface but is intentionally not implemented."""


class StorageError(TaskAppError):
    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class RecordFileMissing(StorageError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "record file does not exist")


class MalformedRecord(StorageError):
    def __init__(self, path: str | Path, line_no: int, reason: str) -> None:
        self.line_no = line_no
        super().__init__(path, f"line {line_no}: {reason}")
