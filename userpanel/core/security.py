"""Password hashing policy and JWT session tokens."""

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any, Protocol

import bcrypt
import jwt

from userpanel.core.config import settings

if TYPE_CHECKING:
    from userpanel.core.config import Settings

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72

# Min/max lengths for email and password validation.
EMAIL_MIN_LEN = 3
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128


class PasswordHasher(Protocol):
    """One-way password hashing used for storing and checking credentials."""

    def hash(self, plain_password: str) -> str: ...

    def verify(self, plain_password: str, hashed: str) -> bool: ...


class BcryptPasswordHasher:
    """bcrypt hashing; the only encoder allowed in production."""

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    def hash(self, plain_password: str) -> str:
        pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def verify(self, plain_password: str, hashed: str) -> bool:
        pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        try:
            return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False


class NoOpPasswordHasher:
    """
    Stores passwords as plain text.

    Intentionally insecure: for a training setup only, never for real accounts.
    Settings refuse it when APP_ENV is 'prod'.
    """

    def hash(self, plain_password: str) -> str:
        return plain_password

    def verify(self, plain_password: str, hashed: str) -> bool:
        return plain_password == hashed


def get_password_hasher(app_settings: "Settings | None" = None) -> PasswordHasher:
    """Return the hasher selected by PASSWORD_ENCODER."""
    s = app_settings or settings
    if s.PASSWORD_ENCODER == "noop":
        return NoOpPasswordHasher()
    return BcryptPasswordHasher(rounds=s.BCRYPT_ROUNDS)


def create_access_token(sub: str, authorities: list[str]) -> str:
    """Create a JWT access token with sub (user email), authorities, and exp."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": sub,
        "authorities": sorted(authorities),
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, authorities, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
    )
