"""Token login for API clients."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from userpanel.api.deps import get_hasher
from userpanel.core.database import get_db
from userpanel.core.exceptions import AuthenticationError
from userpanel.core.security import PasswordHasher, create_access_token
from userpanel.schemas.auth import TokenRequest, TokenResponse
from userpanel.services.auth import authenticate

router = APIRouter()


@router.post("/token", response_model=TokenResponse)
def issue_token(
    body: TokenRequest,
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_hasher)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    try:
        principal = authenticate(db, body.email, body.password, hasher)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
    token = create_access_token(sub=principal.username, authorities=list(principal.authorities))
    return TokenResponse(access_token=token, token_type="bearer")
