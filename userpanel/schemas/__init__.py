"""Pydantic request/response schemas."""

from userpanel.schemas.auth import Principal, TokenRequest, TokenResponse
from userpanel.schemas.health import HealthResponse
from userpanel.schemas.user import (
    RoleDto,
    UserDto,
    UserResponse,
    UserWithRolesResponse,
)

__all__ = [
    "HealthResponse",
    "Principal",
    "RoleDto",
    "TokenRequest",
    "TokenResponse",
    "UserDto",
    "UserResponse",
    "UserWithRolesResponse",
]
