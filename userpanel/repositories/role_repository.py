"""Data access for the roles table."""

from sqlalchemy.orm import Session

from userpanel.models.role import Role


class RoleRepository:
    """Repository for role rows. Does not commit; the caller owns the transaction."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_name(self, name: str) -> Role | None:
        return self.db.query(Role).filter(Role.name == name).first()

    def save(self, role: Role) -> Role:
        self.db.add(role)
        self.db.flush()
        return role
