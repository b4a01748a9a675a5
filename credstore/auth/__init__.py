"""Register and authenticate operations."""

from .hashing import HASH_PREFIX, hash_password
from .operations import AuthOutcome, AuthResult, authenticate_user, register_user

__all__ = [
    "HASH_PREFIX",
    "AuthOutcome",
    "AuthResult",
    "authenticate_user",
    "hash_password",
    "register_user",
]
