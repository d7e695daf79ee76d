"""
Create a user account with roles. Run from project root:
  python -m userpanel.scripts.create_user EMAIL PASSWORD [ROLE ...]
Example:
  python -m userpanel.scripts.create_user jane@example.com s3cret ADMIN USER
"""
import argparse
import sys

from userpanel.core.database import SessionLocal
from userpanel.core.security import (
    EMAIL_MAX_LEN,
    EMAIL_MIN_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    get_password_hasher,
)
from userpanel.schemas.user import RoleDto, UserDto
from userpanel.services.user_service import UserService, role_display_names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create a user account from the command line.")
    parser.add_argument("email", help="Login email (3-255 chars)")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument("roles", nargs="*", default=["USER"], help="Role names without ROLE_ prefix")
    parser.add_argument("--firstname", default=None)
    parser.add_argument("--lastname", default=None)
    parser.add_argument("--age", type=int, default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    email = args.email.strip()
    if not (EMAIL_MIN_LEN <= len(email) <= EMAIL_MAX_LEN):
        print("Invalid email length.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print("Password must be 1-128 characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        service = UserService(db, get_password_hasher())
        if service.find_by_email(email) is not None:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        user = service.add_user_with_roles(
            UserDto(
                firstname=args.firstname,
                lastname=args.lastname,
                age=args.age,
                email=email,
                password=args.password,
                roles=[RoleDto(name=r.upper()) for r in args.roles],
            )
        )
        print(f"Created user '{email}' with roles {role_display_names(user)}.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
