from credstore.auth import AuthOutcome, authenticate_user, register_user
from credstore.auth.operations import check_credentials
from credstore.common import UserRecord, UserStore
from credstore.store import MalformedStoreError

from test_base import StoreTestCase


class TestRegister(StoreTestCase):
    def test_register_creates_store(self):
        record = register_user(self.repository, "alice", "secret", "admin")
        self.assertEqual(record, UserRecord("alice", "HASH_secret", "admin"))
        self.assertEqual(
            self.read_document(),
            {
                "users": [
                    {"username": "alice", "password_hash": "HASH_secret", "role": "admin"}
                ]
            },
        )

    def test_register_appends_in_order(self):
        register_user(self.repository, "alice", "secret", "admin")
        register_user(self.repository, "bob", "pw1", "user")
        names = [u["username"] for u in self.read_document()["users"]]
        self.assertEqual(names, ["alice", "bob"])

    def test_register_accepts_duplicates_and_empty_values(self):
        register_user(self.repository, "dup", "a", "x")
        register_user(self.repository, "dup", "b", "y")
        register_user(self.repository, "", "", "")
        users = self.repository.load().users
        self.assertEqual(len(users), 3)
        self.assertEqual(users[2], UserRecord("", "HASH_", ""))

    def test_register_adds_users_key_to_keyless_store(self):
        self.write_document({"other": 1})
        register_user(self.repository, "alice", "secret", "admin")
        document = self.read_document()
        self.assertEqual(document["other"], 1)
        self.assertEqual(len(document["users"]), 1)

    def test_register_on_malformed_store_does_not_overwrite(self):
        self.store_path.write_text("{broken", encoding="utf-8")
        with self.assertRaises(MalformedStoreError):
            register_user(self.repository, "alice", "secret", "admin")
        self.assertEqual(self.store_path.read_text(encoding="utf-8"), "{broken")


class TestAuthenticate(StoreTestCase):
    def test_register_then_authenticate(self):
        register_user(self.repository, "alice", "secret", "admin")
        result = authenticate_user(self.repository, "alice", "secret")
        self.assertTrue(result.success)
        self.assertEqual(result.outcome, AuthOutcome.SUCCESS)
        self.assertEqual(result.user.role, "admin")
        self.assertEqual(result.message, "Logged in as alice (admin)")

    def test_wrong_password(self):
        register_user(self.repository, "bob", "pw1", "user")
        result = authenticate_user(self.repository, "bob", "pw2")
        self.assertFalse(result.success)
        self.assertEqual(result.outcome, AuthOutcome.WRONG_PASSWORD)
        self.assertEqual(result.message, "Incorrect password")

    def test_unknown_user_on_missing_store(self):
        result = authenticate_user(self.repository, "carol", "x")
        self.assertEqual(result.outcome, AuthOutcome.USER_NOT_FOUND)
        self.assertIsNone(result.user)
        self.assertEqual(result.message, "User not found")

    def test_keyless_store_reports_user_not_found(self):
        self.write_document({"other": 1})
        result = authenticate_user(self.repository, "carol", "x")
        self.assertEqual(result.outcome, AuthOutcome.USER_NOT_FOUND)

    def test_username_match_is_exact(self):
        register_user(self.repository, "Alice", "secret", "admin")
        result = authenticate_user(self.repository, "alice", "secret")
        self.assertEqual(result.outcome, AuthOutcome.USER_NOT_FOUND)

    def test_authenticate_does_not_write(self):
        register_user(self.repository, "alice", "secret", "admin")
        before = self.store_path.read_bytes()
        authenticate_user(self.repository, "alice", "wrong")
        authenticate_user(self.repository, "nobody", "x")
        self.assertEqual(self.store_path.read_bytes(), before)

    def test_authenticate_missing_store_does_not_create_it(self):
        authenticate_user(self.repository, "carol", "x")
        self.assertFalse(self.store_path.exists())

    def test_authenticate_malformed_store_raises(self):
        self.store_path.write_text("nope", encoding="utf-8")
        with self.assertRaises(MalformedStoreError):
            authenticate_user(self.repository, "alice", "secret")


def test_first_match_wins() -> None:
    store = UserStore(
        users=[
            UserRecord("dup", "HASH_first", "one"),
            UserRecord("dup", "HASH_second", "two"),
        ]
    )

    first = check_credentials(store, "dup", "first")
    assert first.outcome is AuthOutcome.SUCCESS
    assert first.user is not None
    assert first.user.role == "one"

    # The second record is shadowed by the first one
    second = check_credentials(store, "dup", "second")
    assert second.outcome is AuthOutcome.WRONG_PASSWORD


def test_match_skips_other_users() -> None:
    store = UserStore(
        users=[
            UserRecord("bob", "HASH_pw", "user"),
            UserRecord("alice", "HASH_secret", "admin"),
        ]
    )
    result = check_credentials(store, "alice", "secret")
    assert result.success
    assert result.message == "Logged in as alice (admin)"
