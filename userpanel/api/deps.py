"""Request dependencies: password hasher, user service, principal, and URL access checks."""

import logging
from typing import Annotated

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from userpanel.core.access import Access, resolve_access_rule
from userpanel.core.config import get_settings
from userpanel.core.database import get_db
from userpanel.core.exceptions import NotAuthenticatedError
from userpanel.core.security import PasswordHasher, decode_access_token, get_password_hasher
from userpanel.models.user import User
from userpanel.repositories.user_repository import UserRepository
from userpanel.schemas.auth import Principal
from userpanel.schemas.user import UserWithRolesResponse
from userpanel.services.auth import principal_from_user
from userpanel.services.user_service import UserService, role_display_names

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_hasher() -> PasswordHasher:
    """Dependency: the password hasher selected by PASSWORD_ENCODER."""
    return get_password_hasher(get_settings())


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_hasher)],
) -> UserService:
    return UserService(db, hasher)


def _read_token(request: Request, credentials: HTTPAuthorizationCredentials | None) -> str | None:
    # Bearer header wins over the session cookie.
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(get_settings().SESSION_COOKIE_NAME)


def get_optional_principal(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> Principal | None:
    """
    Dependency: principal for the request's token, or None.

    The token's subject is looked up again so role changes and deletions apply
    to existing sessions.
    """
    token = _read_token(request, credentials)
    if not token:
        return None
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError:
        logger.debug("Rejected invalid or expired token")
        return None
    sub = payload.get("sub")
    if not sub:
        return None
    user = UserRepository(db).find_by_email(sub)
    if user is None:
        return None
    principal = principal_from_user(user)
    if not principal.enabled or not principal.account_usable:
        return None
    return principal


def enforce_access_rules(
    request: Request,
    principal: Annotated[Principal | None, Depends(get_optional_principal)],
) -> Principal | None:
    """
    App-wide dependency applying the URL access rules to every route.

    Raises NotAuthenticatedError when a protected path has no principal and
    403 when the principal lacks the required role.
    """
    path = request.url.path
    rule = resolve_access_rule(path)
    if rule.access in (Access.IGNORED, Access.PUBLIC):
        return principal
    if principal is None:
        raise NotAuthenticatedError(path)
    if rule.access is Access.ROLE and not principal.has_authority(rule.role):
        logger.info("Access denied: user=%s path=%s required=%s", principal.username, path, rule.role)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied",
        )
    return principal


def get_current_principal(
    request: Request,
    principal: Annotated[Principal | None, Depends(enforce_access_rules)],
) -> Principal:
    """Dependency: the authenticated principal; raises NotAuthenticatedError if there is none."""
    if principal is None:
        raise NotAuthenticatedError(request.url.path)
    return principal


def user_with_roles(user: User, roles: list[str] | None = None) -> UserWithRolesResponse:
    """Outbound shape of user with its role display names."""
    return UserWithRolesResponse(
        id=user.id,
        firstname=user.firstname,
        lastname=user.lastname,
        age=user.age,
        email=user.email,
        roles=roles if roles is not None else role_display_names(user),
    )


def current_user_or_404(service: UserService, principal: Principal) -> UserWithRolesResponse:
    user = service.find_by_email(principal.username)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user_with_roles(user)
