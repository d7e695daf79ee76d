"""User administration: lookups, listing with role names, add/update with roles, delete."""

import logging
from collections import OrderedDict
from collections.abc import Iterable

from sqlalchemy.orm import Session

from userpanel.core.access import role_display_name, role_stored_name
from userpanel.core.security import PasswordHasher
from userpanel.models.role import Role
from userpanel.models.user import User
from userpanel.repositories.role_repository import RoleRepository
from userpanel.repositories.user_repository import UserRepository
from userpanel.schemas.user import RoleDto, UserDto
from userpanel.services.user_mapper import to_model

logger = logging.getLogger(__name__)


def role_display_names(user: User) -> list[str]:
    """Role names of user without the ROLE_ prefix, sorted."""
    return sorted(role_display_name(role.name) for role in user.roles)


class UserService:
    """
    Business logic over UserRepository and RoleRepository.

    Each write method commits once on success and rolls back on any error.
    """

    def __init__(self, db: Session, hasher: PasswordHasher) -> None:
        self.db = db
        self.hasher = hasher
        self.users = UserRepository(db)
        self.roles = RoleRepository(db)

    def find_by_email(self, email: str) -> User | None:
        return self.users.find_by_email(email)

    def get_all_users_with_roles(self) -> "OrderedDict[User, list[str]]":
        """
        Return every user (ascending id) mapped to its role display names.

        Role names have the ROLE_ prefix stripped and are sorted. If a user
        appears twice, the first entry wins.
        """
        result: OrderedDict[User, list[str]] = OrderedDict()
        for user in sorted(self.users.find_all_ordered_by_id(), key=lambda u: u.id):
            result.setdefault(user, role_display_names(user))
        return result

    def add_user_with_roles(self, dto: UserDto) -> User:
        """Create a user from dto with a hashed password and the resolvable roles."""
        user = to_model(dto)
        user.id = None
        user.password = self.hasher.hash(dto.password or "")
        user.roles = self._resolve_roles(dto.roles)
        try:
            self.users.save(user)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info("User added: id=%s, roles=%s", user.id, role_display_names(user))
        return user

    def update_user_with_roles(self, dto: UserDto) -> User:
        """
        Overwrite the user with dto.id. The password is always re-hashed from dto.

        Raises ValueError if no user has dto.id; nothing is written in that case.
        """
        existing = self.users.find_by_id(dto.id) if dto.id is not None else None
        if existing is None:
            raise ValueError(f"User with id {dto.id} does not exist")
        try:
            existing.firstname = dto.firstname
            existing.lastname = dto.lastname
            existing.age = dto.age
            existing.email = dto.email
            existing.password = self.hasher.hash(dto.password or "")
            existing.roles = self._resolve_roles(dto.roles)
            self.users.save(existing)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info("User updated: id=%s, roles=%s", existing.id, role_display_names(existing))
        return existing

    def delete(self, user_id: int) -> None:
        """Delete the user with user_id. A missing id is a no-op."""
        try:
            deleted = self.users.delete_by_id(user_id)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        if deleted:
            logger.info("User deleted: id=%s", user_id)

    def _resolve_roles(self, role_dtos: Iterable[RoleDto]) -> set[Role]:
        # Names that match no stored role are dropped without error.
        roles: set[Role] = set()
        for role_dto in role_dtos:
            role = self.roles.find_by_name(role_stored_name(role_dto.name))
            if role is None:
                logger.debug("Ignoring unknown role name: %s", role_dto.name)
                continue
            roles.add(role)
        return roles
