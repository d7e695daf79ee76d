"""Admin REST endpoints: current user, user listing, add, update, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from userpanel.api.deps import (
    current_user_or_404,
    get_current_principal,
    get_user_service,
    user_with_roles,
)
from userpanel.core.security import EMAIL_MAX_LEN, EMAIL_MIN_LEN
from userpanel.schemas.auth import Principal
from userpanel.schemas.user import UserDto, UserResponse, UserWithRolesResponse
from userpanel.services.user_service import UserService

router = APIRouter()


def _validate_credentials(dto: UserDto) -> None:
    if not dto.email or not (EMAIL_MIN_LEN <= len(dto.email) <= EMAIL_MAX_LEN):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Email is required.",
        )
    if not dto.password:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Password is required.",
        )


@router.get("/current-user", response_model=UserWithRolesResponse)
def get_current_user(
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserWithRolesResponse:
    """Return the logged-in admin's own account."""
    return current_user_or_404(service, principal)


@router.get("/all-users", response_model=list[UserResponse])
def get_all_users(
    service: Annotated[UserService, Depends(get_user_service)],
) -> list[UserResponse]:
    """List all users ordered by id, without role information."""
    return [UserResponse.model_validate(u) for u in service.get_all_users_with_roles()]


@router.get("/all-users-with-roles", response_model=list[UserWithRolesResponse])
def get_all_users_with_roles(
    service: Annotated[UserService, Depends(get_user_service)],
) -> list[UserWithRolesResponse]:
    """List all users ordered by id, each with sorted role names (no ROLE_ prefix)."""
    return [
        user_with_roles(user, roles)
        for user, roles in service.get_all_users_with_roles().items()
    ]


@router.post("/add", response_class=PlainTextResponse)
def add_user(
    body: UserDto,
    service: Annotated[UserService, Depends(get_user_service)],
) -> str:
    _validate_credentials(body)
    service.add_user_with_roles(body)
    return "User added successfully"


@router.put("/update", response_class=PlainTextResponse)
def update_user(
    body: UserDto,
    service: Annotated[UserService, Depends(get_user_service)],
) -> str:
    """Overwrite a user by id. An unknown id is an unhandled ValueError (500)."""
    _validate_credentials(body)
    service.update_user_with_roles(body)
    return "User updated successfully"


@router.delete("/delete", response_class=PlainTextResponse)
def delete_user(
    body: UserDto,
    service: Annotated[UserService, Depends(get_user_service)],
) -> str:
    """Delete by the id in the body; other fields are ignored."""
    if body.id is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="User id is required.",
        )
    service.delete(body.id)
    return "User deleted successfully"
