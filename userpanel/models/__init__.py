"""SQLAlchemy ORM models."""

from userpanel.models.base import Base
from userpanel.models.role import Role
from userpanel.models.user import User, users_roles

__all__ = ["Base", "Role", "User", "users_roles"]
