# src/taskapp/users/user_store.py

from __future__ import annotations

import hmac
import logging
from collections.abc import Callable
from pathlib import Path

from ..core.errors import StorageError
from ..storage.record_file import Outcome, RecordFile
from .user_models import USER_HEADER, User

logger = logging.getLogger(__name__)


class UserStore:
    """
    Read-only access to the user record file.

    Lookups are linear scans that keep the LAST matching record: the file has
    no uniqueness guarantee and nothing here enforces one.

    Read failures never propagate: they are logged and the lookup degrades to
    "absent". Use the lookup_* / load variants to tell the two apart.
    """

    def __init__(self, path: str | Path) -> None:
        self._file = RecordFile(path, USER_HEADER)

    @property
    def path(self) -> Path:
        return self._file.path

    def load(self) -> Outcome[list[User]]:
        try:
            return Outcome(self._file.read_records(User.from_fields))
        except StorageError as e:
            logger.warning("User file unreadable, treating as empty: %s", e)
            return Outcome([], e)

    def find_all(self) -> list[User]:
        return self.load().value

    def _scan_last(self, match: Callable[[User], bool]) -> Outcome[User | None]:
        loaded = self.load()
        found: User | None = None
        for user in loaded.value:
            if match(user):
                found = user
        return Outcome(found, loaded.error)

    def lookup_by_code(self, code: int) -> Outcome[User | None]:
        return self._scan_last(lambda u: u.code == code)

    def find_by_code(self, code: int) -> User | None:
        return self.lookup_by_code(code).value

    def find_by_credentials(self, email: str, password: str) -> User | None:
        """Exact, case-sensitive match on both email and password (login)."""

        def match(u: User) -> bool:
            return u.email == email and hmac.compare_digest(
                u.password.encode("utf-8"), password.encode("utf-8")
            )

        user = self._scan_last(match).value
        if user is None:
            logger.info("Login failed for email=%s", email)
        return user
