"""Tests for the UserDto to User field copy."""

import unittest

from userpanel.schemas.user import RoleDto, UserDto
from userpanel.services.user_mapper import to_model


class TestToModel(unittest.TestCase):
    def test_copies_plain_fields_only(self) -> None:
        dto = UserDto(
            id=7,
            firstname="Ann",
            lastname="Lee",
            age=40,
            email="ann@example.com",
            password="secret",
            roles=[RoleDto(name="ADMIN")],
        )
        user = to_model(dto)
        self.assertEqual(
            (user.id, user.firstname, user.lastname, user.age, user.email),
            (7, "Ann", "Lee", 40, "ann@example.com"),
        )
        self.assertIsNone(user.password)
        self.assertEqual(user.roles, set())
        self.assertTrue(user.enabled)

    def test_missing_fields_stay_unset(self) -> None:
        user = to_model(UserDto(email="ann@example.com"))
        self.assertIsNone(user.id)
        self.assertIsNone(user.age)


if __name__ == "__main__":
    unittest.main()
