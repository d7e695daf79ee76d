"""Request/response schemas for authentication and the request principal."""

from pydantic import BaseModel, ConfigDict, Field


class TokenRequest(BaseModel):
    """Credentials for API token login."""

    email: str = Field(..., min_length=3, max_length=255, description="Account email")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class Principal(BaseModel):
    """Authenticated identity: login name plus the capabilities derived from the account."""

    model_config = ConfigDict(frozen=True)

    username: str
    authorities: frozenset[str] = frozenset()
    enabled: bool = True
    account_usable: bool = True

    def has_authority(self, authority: str) -> bool:
        return authority in self.authorities
