"""ORM model for user accounts and their role assignments."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from userpanel.models.base import Base

users_roles = Table(
    "users_roles",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)


class User(Base):
    """
    Persisted account record. The email is the login name.

    Authentication concerns live in services.auth.principal_from_user, not here.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    firstname = Column(String(255), nullable=True)
    lastname = Column(String(255), nullable=True)
    age = Column(Integer, nullable=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    enabled = Column(Boolean, nullable=False, default=True)

    roles = relationship("Role", secondary=users_roles, collection_class=set, lazy="selectin")

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r})"
