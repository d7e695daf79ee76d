"""Tests for password hashers, encoder selection, settings checks and JWT tokens."""

import unittest
from unittest.mock import MagicMock

import jwt
from pydantic import ValidationError

from userpanel.core.config import Settings
from userpanel.core.security import (
    BcryptPasswordHasher,
    NoOpPasswordHasher,
    create_access_token,
    decode_access_token,
    get_password_hasher,
)

from tests.helpers import FAST_ROUNDS


class TestBcryptPasswordHasher(unittest.TestCase):
    def setUp(self) -> None:
        self.hasher = BcryptPasswordHasher(rounds=FAST_ROUNDS)

    def test_hash_verifies(self) -> None:
        hashed = self.hasher.hash("admin")
        self.assertNotEqual(hashed, "admin")
        self.assertTrue(self.hasher.verify("admin", hashed))
        self.assertFalse(self.hasher.verify("wrong", hashed))

    def test_same_password_gets_new_salt(self) -> None:
        self.assertNotEqual(self.hasher.hash("admin"), self.hasher.hash("admin"))

    def test_malformed_hash_does_not_verify(self) -> None:
        self.assertFalse(self.hasher.verify("admin", "not-a-bcrypt-hash"))


class TestNoOpPasswordHasher(unittest.TestCase):
    def test_stores_plain_text(self) -> None:
        hasher = NoOpPasswordHasher()
        self.assertEqual(hasher.hash("user"), "user")
        self.assertTrue(hasher.verify("user", "user"))
        self.assertFalse(hasher.verify("user", "admin"))


class TestGetPasswordHasher(unittest.TestCase):
    def test_bcrypt_selected(self) -> None:
        settings = MagicMock()
        settings.PASSWORD_ENCODER = "bcrypt"
        settings.BCRYPT_ROUNDS = FAST_ROUNDS
        hasher = get_password_hasher(settings)
        self.assertIsInstance(hasher, BcryptPasswordHasher)
        self.assertEqual(hasher.rounds, FAST_ROUNDS)

    def test_noop_selected(self) -> None:
        settings = MagicMock()
        settings.PASSWORD_ENCODER = "noop"
        self.assertIsInstance(get_password_hasher(settings), NoOpPasswordHasher)


class TestSettingsValidation(unittest.TestCase):
    def test_noop_refused_in_prod(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, APP_ENV="prod", PASSWORD_ENCODER="noop")

    def test_noop_allowed_in_dev(self) -> None:
        s = Settings(_env_file=None, APP_ENV="dev", PASSWORD_ENCODER="noop")
        self.assertEqual(s.PASSWORD_ENCODER, "noop")

    def test_unknown_encoder_refused(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, PASSWORD_ENCODER="md5")

    def test_non_sql_database_url_refused(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="mysql://localhost/db")

    def test_sqlite_url_accepted(self) -> None:
        s = Settings(_env_file=None, DATABASE_URL="sqlite:///./userpanel.db")
        self.assertEqual(s.DATABASE_URL, "sqlite:///./userpanel.db")


class TestAccessToken(unittest.TestCase):
    def test_round_trip(self) -> None:
        token = create_access_token(sub="admin@mail.ru", authorities=["ROLE_USER", "ROLE_ADMIN"])
        payload = decode_access_token(token)
        self.assertEqual(payload["sub"], "admin@mail.ru")
        self.assertEqual(payload["authorities"], ["ROLE_ADMIN", "ROLE_USER"])

    def test_tampered_token_rejected(self) -> None:
        token = create_access_token(sub="admin@mail.ru", authorities=[])
        with self.assertRaises(jwt.PyJWTError):
            decode_access_token(token + "x")


if __name__ == "__main__":
    unittest.main()
