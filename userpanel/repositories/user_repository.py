"""Data access for the users table."""

from sqlalchemy.orm import Session

from userpanel.models.user import User


class UserRepository:
    """Repository for user rows. Does not commit; the caller owns the transaction."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def find_all_ordered_by_id(self) -> list[User]:
        return self.db.query(User).order_by(User.id).all()

    def exists_by_email(self, email: str) -> bool:
        return self.db.query(User.id).filter(User.email == email).first() is not None

    def save(self, user: User) -> User:
        self.db.add(user)
        self.db.flush()
        return user

    def delete_by_id(self, user_id: int) -> int:
        """Delete the user with user_id; returns the number of rows removed (0 or 1)."""
        user = self.find_by_id(user_id)
        if user is None:
            return 0
        self.db.delete(user)
        self.db.flush()
        return 1
