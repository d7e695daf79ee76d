"""Tests for URL access rules and role name conversion."""

import unittest

from userpanel.core.access import (
    ROLE_ADMIN,
    ROLE_USER,
    Access,
    path_matches,
    resolve_access_rule,
    role_display_name,
    role_stored_name,
)


class TestPathMatches(unittest.TestCase):
    def test_exact_pattern(self) -> None:
        self.assertTrue(path_matches("/admin", "/admin"))
        self.assertFalse(path_matches("/admin", "/admin/x"))
        self.assertFalse(path_matches("/admin", "/administrator"))

    def test_double_star_matches_prefix_and_below(self) -> None:
        self.assertTrue(path_matches("/api/admin/**", "/api/admin"))
        self.assertTrue(path_matches("/api/admin/**", "/api/admin/all-users"))
        self.assertTrue(path_matches("/api/admin/**", "/api/admin/a/b"))
        self.assertFalse(path_matches("/api/admin/**", "/api/administrator"))


class TestResolveAccessRule(unittest.TestCase):
    def test_public_paths(self) -> None:
        for path in ("/", "/login", "/logout", "/api/auth/token", "/api/health", "/api/health/"):
            with self.subTest(path=path):
                self.assertIs(resolve_access_rule(path).access, Access.PUBLIC)

    def test_static_assets_are_ignored(self) -> None:
        for path in ("/css/main.css", "/favicon/icon.png"):
            with self.subTest(path=path):
                self.assertIs(resolve_access_rule(path).access, Access.IGNORED)

    def test_admin_paths_need_admin_role(self) -> None:
        for path in ("/admin", "/api/admin/all-users", "/api/admin/delete"):
            with self.subTest(path=path):
                rule = resolve_access_rule(path)
                self.assertIs(rule.access, Access.ROLE)
                self.assertEqual(rule.role, ROLE_ADMIN)

    def test_user_page_needs_user_role(self) -> None:
        rule = resolve_access_rule("/user")
        self.assertIs(rule.access, Access.ROLE)
        self.assertEqual(rule.role, ROLE_USER)

    def test_other_paths_need_authentication(self) -> None:
        for path in ("/api/user/current", "/docs", "/openapi.json", "/anything/else"):
            with self.subTest(path=path):
                self.assertIs(resolve_access_rule(path).access, Access.AUTHENTICATED)


class TestRoleNames(unittest.TestCase):
    def test_display_name_strips_prefix(self) -> None:
        self.assertEqual(role_display_name("ROLE_ADMIN"), "ADMIN")

    def test_stored_name_adds_prefix(self) -> None:
        self.assertEqual(role_stored_name("USER"), "ROLE_USER")


if __name__ == "__main__":
    unittest.main()
