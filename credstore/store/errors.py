"""Custom exceptions for the store module."""


class StoreError(Exception):
    """Base class for failures reading or writing the user store."""

    pass


class MalformedStoreError(StoreError):
    """Raised when the store file exists but is not a usable JSON document."""

    pass


class PersistenceError(StoreError):
    """Raised when the store could not be written back to disk."""

    pass
