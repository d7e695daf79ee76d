"""ORM model for roles (named permission tags such as ROLE_ADMIN)."""

from sqlalchemy import Column, Integer, String

from userpanel.models.base import Base


class Role(Base):
    """
    Role granted to users through the users_roles join table.

    name keeps the ROLE_ prefix; the API shows it stripped.
    """

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=False, unique=True, index=True)

    def __repr__(self) -> str:
        return f"Role(id={self.id!r}, name={self.name!r})"
