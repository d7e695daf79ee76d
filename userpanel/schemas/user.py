"""Wire shapes for users and roles. Role names are in display form (no ROLE_ prefix)."""

from pydantic import BaseModel, ConfigDict, Field


class RoleDto(BaseModel):
    """Role as sent and received by the API, e.g. {"name": "ADMIN"}."""

    id: int | None = None
    name: str = Field(..., min_length=1, max_length=64)


class UserDto(BaseModel):
    """
    Incoming user payload for add, update and delete.

    Every field is optional so that delete can send only the id; add and update
    check email and password in the router.
    """

    id: int | None = None
    firstname: str | None = Field(default=None, max_length=255)
    lastname: str | None = Field(default=None, max_length=255)
    age: int | None = Field(default=None, ge=0, le=200)
    email: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, max_length=128)
    roles: list[RoleDto] = Field(default_factory=list)


class UserResponse(BaseModel):
    """User without password or role information."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    firstname: str | None = None
    lastname: str | None = None
    age: int | None = None
    email: str


class UserWithRolesResponse(UserResponse):
    """User plus role display names, sorted."""

    roles: list[str] = Field(default_factory=list)
