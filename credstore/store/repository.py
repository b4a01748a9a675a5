"""Repository for the JSON user store.

The whole file is read on every load and rewritten on every save. Callers go
through StoreRepository only, so the flat file can be replaced by another
backend without touching the register and authenticate logic.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from credstore.common.user import UserRecord, UserStore
from .errors import MalformedStoreError, PersistenceError

LOGGER = logging.getLogger(__name__)

USERS_KEY = "users"
JSON_INDENT = 4


class StoreRepository:
    """Load, append to and save the user store at a fixed path."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> UserStore:
        """Read the store file into memory.

        Returns:
            UserStore: The parsed store. Empty, with ``users_initialized`` set,
            when the file is missing or has no ``users`` key.

        Raises:
            MalformedStoreError: If the file is unreadable, is not valid JSON
            or does not have the expected shape.
        """
        if not self.path.exists():
            LOGGER.debug("Store file %s does not exist, starting empty", self.path)
            return UserStore(users_initialized=True)

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedStoreError(
                f"Store file {self.path} is not valid JSON: {e}"
            ) from e
        except OSError as e:
            raise MalformedStoreError(f"Could not read store file {self.path}: {e}") from e

        if not isinstance(document, dict):
            raise MalformedStoreError(
                f"Store file {self.path} must contain a JSON object"
            )

        extra = {key: value for key, value in document.items() if key != USERS_KEY}
        if USERS_KEY not in document:
            LOGGER.debug("Store file %s has no users key, starting empty", self.path)
            return UserStore(users_initialized=True, extra=extra)

        raw_users = document[USERS_KEY]
        if not isinstance(raw_users, list):
            raise MalformedStoreError(
                f"'{USERS_KEY}' in {self.path} must be a list, "
                f"got {type(raw_users).__name__}"
            )

        users = []
        for index, raw_user in enumerate(raw_users):
            if not isinstance(raw_user, dict):
                raise MalformedStoreError(
                    f"User entry {index} in {self.path} must be a JSON object"
                )
            users.append(UserRecord.from_dict(raw_user))

        LOGGER.debug("Loaded %d user(s) from %s", len(users), self.path)
        return UserStore(users=users, extra=extra)

    @staticmethod
    def append(store: UserStore, record: UserRecord) -> None:
        """Add a record to the end of the store. Duplicates are allowed."""
        store.users.append(record)

    def save(self, store: UserStore) -> None:
        """Write the full store to disk, replacing the previous contents.

        The document goes to a uniquely named temporary file next to the store
        and is then renamed over it, so the last writer wins. Non-ASCII text
        is written as JSON escapes, which keeps undecodable input bytes
        (held as surrogates) intact.

        Raises:
            PersistenceError: If the file could not be written.
        """
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = Path(f.name)
                json.dump(store.to_document(), f, indent=JSON_INDENT, ensure_ascii=True)
                f.write("\n")
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise PersistenceError(f"Could not write store file {self.path}: {e}") from e
        finally:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
        LOGGER.debug("Saved %d user(s) to %s", len(store.users), self.path)
