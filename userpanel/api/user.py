"""User REST endpoint: the logged-in user's own account."""

from typing import Annotated

from fastapi import APIRouter, Depends

from userpanel.api.deps import current_user_or_404, get_current_principal, get_user_service
from userpanel.schemas.auth import Principal
from userpanel.schemas.user import UserWithRolesResponse
from userpanel.services.user_service import UserService

router = APIRouter()


@router.get("/current", response_model=UserWithRolesResponse)
def get_current_user(
    principal: Annotated[Principal, Depends(get_current_principal)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserWithRolesResponse:
    return current_user_or_404(service, principal)
