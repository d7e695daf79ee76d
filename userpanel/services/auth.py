"""Authentication: principal adapter, credential check, and post-login redirect."""

import logging

from sqlalchemy.orm import Session

from userpanel.core.access import ROLE_ADMIN, ROLE_USER
from userpanel.core.exceptions import BadCredentialsError, DisabledAccountError
from userpanel.core.security import PasswordHasher
from userpanel.models.user import User
from userpanel.repositories.user_repository import UserRepository
from userpanel.schemas.auth import Principal

logger = logging.getLogger(__name__)


def principal_from_user(user: User) -> Principal:
    """
    Capabilities of a stored account: authorities are exactly its role names.

    Expiry and locking are not modelled, so account_usable follows enabled.
    """
    return Principal(
        username=user.email,
        authorities=frozenset(role.name for role in user.roles),
        enabled=bool(user.enabled),
        account_usable=bool(user.enabled),
    )


def authenticate(db: Session, email: str, password: str, hasher: PasswordHasher) -> Principal:
    """
    Check email/password and return the principal.

    Raises BadCredentialsError for an unknown email or wrong password and
    DisabledAccountError for a disabled account.
    """
    user = UserRepository(db).find_by_email(email)
    if user is None:
        logger.info("Login failed: unknown email")
        raise BadCredentialsError()
    if not hasher.verify(password, user.password):
        logger.info("Login failed: bad password for user id=%s", user.id)
        raise BadCredentialsError()
    principal = principal_from_user(user)
    if not principal.enabled or not principal.account_usable:
        logger.info("Login refused: disabled account id=%s", user.id)
        raise DisabledAccountError()
    logger.info("Login succeeded: user id=%s", user.id)
    return principal


def login_success_redirect(principal: Principal) -> str:
    """Where the login form sends a principal after a successful login."""
    if principal.has_authority(ROLE_ADMIN):
        return "/admin"
    if principal.has_authority(ROLE_USER):
        return "/user"
    return "/"
