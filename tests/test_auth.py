"""Tests for the principal adapter, credential checks and post-login redirect."""

import unittest

from userpanel.core.exceptions import BadCredentialsError, DisabledAccountError
from userpanel.models import Role, User
from userpanel.schemas.auth import Principal
from userpanel.services.auth import authenticate, login_success_redirect, principal_from_user
from userpanel.services.seed import seed_initial_data

from tests.helpers import fast_hasher, make_test_database


class TestPrincipalFromUser(unittest.TestCase):
    def test_authorities_are_role_names(self) -> None:
        user = User(email="a@example.com", password="x", enabled=True)
        user.roles = {Role(name="ROLE_ADMIN"), Role(name="ROLE_USER")}
        principal = principal_from_user(user)
        self.assertEqual(principal.username, "a@example.com")
        self.assertEqual(principal.authorities, frozenset({"ROLE_ADMIN", "ROLE_USER"}))
        self.assertTrue(principal.enabled)
        self.assertTrue(principal.account_usable)

    def test_disabled_account_is_not_usable(self) -> None:
        user = User(email="a@example.com", password="x", enabled=False)
        principal = principal_from_user(user)
        self.assertFalse(principal.enabled)
        self.assertFalse(principal.account_usable)


class TestAuthenticate(unittest.TestCase):
    def setUp(self) -> None:
        self.engine, factory = make_test_database()
        self.db = factory()
        self.hasher = fast_hasher()
        seed_initial_data(self.db, self.hasher)

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()

    def test_valid_credentials(self) -> None:
        principal = authenticate(self.db, "admin@mail.ru", "admin", self.hasher)
        self.assertEqual(principal.authorities, frozenset({"ROLE_ADMIN", "ROLE_USER"}))

    def test_unknown_email(self) -> None:
        with self.assertRaises(BadCredentialsError):
            authenticate(self.db, "nobody@mail.ru", "admin", self.hasher)

    def test_wrong_password(self) -> None:
        with self.assertRaises(BadCredentialsError):
            authenticate(self.db, "admin@mail.ru", "user", self.hasher)

    def test_disabled_account(self) -> None:
        user = self.db.query(User).filter(User.email == "user@mail.ru").one()
        user.enabled = False
        self.db.commit()
        with self.assertRaises(DisabledAccountError):
            authenticate(self.db, "user@mail.ru", "user", self.hasher)


class TestLoginSuccessRedirect(unittest.TestCase):
    def test_admin_goes_to_admin_page(self) -> None:
        principal = Principal(username="a", authorities=frozenset({"ROLE_ADMIN", "ROLE_USER"}))
        self.assertEqual(login_success_redirect(principal), "/admin")

    def test_user_goes_to_user_page(self) -> None:
        principal = Principal(username="u", authorities=frozenset({"ROLE_USER"}))
        self.assertEqual(login_success_redirect(principal), "/user")

    def test_no_roles_goes_home(self) -> None:
        self.assertEqual(login_success_redirect(Principal(username="n")), "/")


if __name__ == "__main__":
    unittest.main()
