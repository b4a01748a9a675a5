"""Fundamental credential data model for the store"""

from dataclasses import dataclass, field
from typing import Any


def _as_string(value: Any) -> str:
    # null and absent fields both read as ''
    return "" if value is None else str(value)


@dataclass
class UserRecord:
    """One user's credentials as kept in the store."""

    username: str
    password_hash: str
    role: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserRecord":
        """Build a record from its stored form; absent fields read as ''."""
        return cls(
            username=_as_string(data.get("username")),
            password_hash=_as_string(data.get("password_hash")),
            role=_as_string(data.get("role")),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "username": self.username,
            "password_hash": self.password_hash,
            "role": self.role,
        }


@dataclass
class UserStore:
    """In-memory view of the whole store document.

    ``users_initialized`` is set when the document had no ``users`` key and an
    empty list was substituted. ``extra`` holds every other top-level key so
    that a save writes them back untouched.
    """

    users: list[UserRecord] = field(default_factory=list)
    users_initialized: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    def to_document(self) -> dict[str, Any]:
        document = dict(self.extra)
        document["users"] = [user.to_dict() for user in self.users]
        return document
