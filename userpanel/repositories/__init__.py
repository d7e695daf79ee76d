"""Persistence accessors for users and roles."""

from userpanel.repositories.role_repository import RoleRepository
from userpanel.repositories.user_repository import UserRepository

__all__ = ["RoleRepository", "UserRepository"]
