"""Register and authenticate operations over a StoreRepository."""

import logging
from dataclasses import dataclass
from enum import Enum

from credstore.common.user import UserRecord, UserStore
from credstore.store import StoreRepository
from .hashing import hash_password

LOGGER = logging.getLogger(__name__)


class AuthOutcome(Enum):
    """Result of an authentication attempt."""

    SUCCESS = "success"
    WRONG_PASSWORD = "wrong_password"
    USER_NOT_FOUND = "user_not_found"


@dataclass
class AuthResult:
    """Outcome of an authentication attempt and the matched record, if any."""

    outcome: AuthOutcome
    user: UserRecord | None = None

    @property
    def success(self) -> bool:
        return self.outcome is AuthOutcome.SUCCESS

    @property
    def message(self) -> str:
        if self.outcome is AuthOutcome.SUCCESS and self.user is not None:
            return f"Logged in as {self.user.username} ({self.user.role})"
        if self.outcome is AuthOutcome.WRONG_PASSWORD:
            return "Incorrect password"
        return "User not found"


def register_user(
    repository: StoreRepository, username: str, password: str, role: str
) -> UserRecord:
    """
    Append a new user to the store and write it back to disk.

    No checks are made: duplicate usernames, empty strings and any role are
    accepted.

    Args:
        repository (StoreRepository): Where the store lives.
        username (str): The username to register.
        password (str): The plaintext password.
        role (str): Free-form role label.

    Returns:
        UserRecord: The record that was appended.

    Raises:
        MalformedStoreError: If the existing store cannot be loaded.
        PersistenceError: If the updated store cannot be written.
    """
    store = repository.load()
    if store.users_initialized:
        LOGGER.info("Creating users list in %s", repository.path)

    record = UserRecord(
        username=username, password_hash=hash_password(password), role=role
    )
    repository.append(store, record)
    repository.save(store)
    LOGGER.info("Registered user %r with role %r", username, role)
    return record


def check_credentials(store: UserStore, username: str, password: str) -> AuthResult:
    """
    Match a username and password against a loaded store.

    Only the first record with the given username is considered; a password
    mismatch on it fails without looking at later duplicates.
    """
    for user in store.users:
        if user.username != username:
            continue
        if user.password_hash == hash_password(password):
            return AuthResult(AuthOutcome.SUCCESS, user)
        return AuthResult(AuthOutcome.WRONG_PASSWORD, user)
    return AuthResult(AuthOutcome.USER_NOT_FOUND)


def authenticate_user(
    repository: StoreRepository, username: str, password: str
) -> AuthResult:
    """
    Load the store and check the given credentials against it.

    Args:
        repository (StoreRepository): Where the store lives.
        username (str): The username to look up.
        password (str): The plaintext password to verify.

    Returns:
        AuthResult: The outcome; negative outcomes are not raised.

    Raises:
        MalformedStoreError: If the store cannot be loaded.
    """
    store = repository.load()
    result = check_credentials(store, username, password)
    LOGGER.info("Authentication for %r: %s", username, result.outcome.value)
    return result
