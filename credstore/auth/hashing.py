"""Password transform used for stored credentials.

This is a placeholder, not a cryptographic hash. Existing stores depend on
the exact output format, so any change to it breaks every stored record.
"""

HASH_PREFIX = "HASH_"


def hash_password(password: str) -> str:
    """Return the stored representation of a plaintext password."""
    return HASH_PREFIX + password
