"""Copy UserDto fields onto a User entity."""

from userpanel.models.user import User
from userpanel.schemas.user import UserDto

# Fields copied as-is; password and roles need hashing and lookup in the service.
MAPPED_FIELDS = ("id", "firstname", "lastname", "age", "email")


def to_model(dto: UserDto) -> User:
    """Build a new, enabled User from the plain fields of dto."""
    user = User(enabled=True)
    for field in MAPPED_FIELDS:
        value = getattr(dto, field)
        if value is not None:
            setattr(user, field, value)
    return user
