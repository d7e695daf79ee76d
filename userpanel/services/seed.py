"""Idempotent bootstrap of the two roles and the two demo accounts."""

import logging

from sqlalchemy.orm import Session

from userpanel.core.access import ROLE_ADMIN, ROLE_USER
from userpanel.core.security import PasswordHasher
from userpanel.models.role import Role
from userpanel.models.user import User
from userpanel.repositories.role_repository import RoleRepository
from userpanel.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

SEED_ROLES = (ROLE_ADMIN, ROLE_USER)

# (firstname, lastname, email, age, password, role names)
SEED_USERS = (
    ("admin", "admin", "admin@mail.ru", 30, "admin", (ROLE_ADMIN, ROLE_USER)),
    ("user", "User", "user@mail.ru", 30, "user", (ROLE_USER,)),
)


def seed_initial_data(db: Session, hasher: PasswordHasher) -> int:
    """
    Insert missing seed roles and accounts; existing rows are left untouched.

    Returns the number of rows inserted (0 when everything is already present).
    """
    roles_repo = RoleRepository(db)
    users_repo = UserRepository(db)
    inserted = 0
    try:
        roles: dict[str, Role] = {}
        for name in SEED_ROLES:
            role = roles_repo.find_by_name(name)
            if role is None:
                role = roles_repo.save(Role(name=name))
                inserted += 1
            roles[name] = role

        for firstname, lastname, email, age, password, role_names in SEED_USERS:
            if users_repo.exists_by_email(email):
                continue
            user = User(
                firstname=firstname,
                lastname=lastname,
                email=email,
                age=age,
                password=hasher.hash(password),
                enabled=True,
            )
            user.roles = {roles[name] for name in role_names}
            users_repo.save(user)
            inserted += 1
        db.commit()
    except Exception:
        db.rollback()
        raise

    if inserted > 0:
        logger.info("Seed data inserted: rows=%s", inserted)
    return inserted
