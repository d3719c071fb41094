# src/taskapp/storage/record_file.py

"""
Flat record files: one header line, then one comma-separated record per line.

There is no quoting or escaping. A field that contains the delimiter or a line
break cannot be represented and is rejected on write.

Each store owns exactly one RecordFile. Reads load the whole file; writes
replace the whole file (temp file + os.replace).
"""

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from ..core.errors import MalformedRecord, RecordFileMissing, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DELIMITER = ","


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """
    Result of a store operation.

    `value` is always usable: on failure it is the degraded result
    (empty list, None, 0). `error` tells a storage failure apart from a
    legitimately empty/absent result.
    """

    value: T
    error: StorageError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RecordFile:
    def __init__(self, path: str | Path, header: Sequence[str]) -> None:
        self._path = Path(path)
        self._header = tuple(header)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def header(self) -> tuple[str, ...]:
        return self._header

    def exists(self) -> bool:
        return self._path.is_file()

    def ensure_exists(self) -> bool:
        """Create the file with only its header line. Returns True if it was created."""
        if self.exists():
            return False
        self.write_records([])
        logger.info("Created record file %s", self._path)
        return True

    # ---- reading ----

    def read_records(self, parse: Callable[[list[str]], T]) -> list[T]:
        """
        Parse every data line (header skipped, blank lines ignored) in file order.

        Raises:
        - RecordFileMissing if the file does not exist
        - MalformedRecord on a wrong field count or when `parse` raises ValueError
        - StorageError on any other OS-level read failure
        """
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise RecordFileMissing(self._path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(self._path, f"read failed: {e}") from e

        out: list[T] = []
        lines = text.splitlines()
        for line_no, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue
            fields = line.split(DELIMITER)
            if len(fields) != len(self._header):
                raise MalformedRecord(
                    self._path,
                    line_no,
                    f"expected {len(self._header)} fields, got {len(fields)}",
                )
            try:
                out.append(parse(fields))
            except ValueError as e:
                raise MalformedRecord(self._path, line_no, str(e)) from e
        logger.debug("Read %d records from %s", len(out), self._path)
        return out

    # ---- writing ----

    def _format_line(self, fields: Sequence[object]) -> str:
        if len(fields) != len(self._header):
            raise StorageError(
                self._path, f"expected {len(self._header)} fields, got {len(fields)}"
            )
        parts = [str(f) for f in fields]
        for part in parts:
            if DELIMITER in part or "\n" in part or "\r" in part:
                raise StorageError(self._path, f"field {part!r} contains a delimiter")
        return DELIMITER.join(parts)

    def write_records(self, records: Iterable[Sequence[object]]) -> int:
        """
        Replace the file with header + records. Returns the number of records written.

        Raises StorageError if a record cannot be formatted or the write fails.
        Nothing is written unless every record formats cleanly.
        """
        lines = [DELIMITER.join(self._header)]
        lines.extend(self._format_line(r) for r in records)
        body = "\n".join(lines) + "\n"

        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(body, encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageError(self._path, f"write failed: {e}") from e
        n = len(lines) - 1
        logger.debug("Wrote %d records to %s", n, self._path)
        return n
