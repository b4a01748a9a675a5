"""Tests for the stored password transform."""

import pytest

from credstore.auth import HASH_PREFIX, hash_password


@pytest.mark.parametrize("password", ["secret", "", "with space", "ünïcødé", "HASH_x"])
def test_hash_is_prefix_plus_plaintext(password: str) -> None:
    assert hash_password(password) == "HASH_" + password
    assert hash_password(password).startswith(HASH_PREFIX)


def test_hash_is_deterministic() -> None:
    assert hash_password("pw1") == hash_password("pw1")


def test_distinct_passwords_give_distinct_hashes() -> None:
    passwords = ["pw1", "pw2", "PW1", "pw1 ", ""]
    hashes = {hash_password(p) for p in passwords}
    assert len(hashes) == len(passwords)
