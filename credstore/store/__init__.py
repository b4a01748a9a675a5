"""Flat-file storage for user records."""

from .errors import MalformedStoreError, PersistenceError, StoreError
from .repository import StoreRepository

__all__ = [
    "MalformedStoreError",
    "PersistenceError",
    "StoreError",
    "StoreRepository",
]
