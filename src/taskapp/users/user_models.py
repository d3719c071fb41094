# src/taskapp/users/user_models.py

from __future__ import annotations

from dataclasses import dataclass, field

USER_HEADER = ("Code", "Name", "Email", "Password")


@dataclass(frozen=True, slots=True)
class User:
    code: int
    name: str
    email: str
    # Stored in plaintext in the user file. Insecure, kept for file compatibility.
    password: str = field(repr=False)

    @classmethod
    def from_fields(cls, fields: list[str]) -> User:
        return cls(
            code=int(fields[0]),
            name=fields[1],
            email=fields[2],
            password=fields[3],
        )
