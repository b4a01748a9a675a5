"""Common data structures shared across modules."""

from .user import UserRecord, UserStore

__all__ = ["UserRecord", "UserStore"]
