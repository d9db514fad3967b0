"""
Users module data models.

User records as stored, the public projection returned by the API, and the
request bodies for registration and login.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field


DISPLAY_NAME_MAX_LENGTH = 32


class User(BaseModel):
    """A user row from the ``users`` table."""

    id: str = Field(..., description="User ID (UUID)")
    display: str = Field(..., description="Display name")
    email: EmailStr = Field(..., description="Email address (unique)")
    password: Optional[str] = Field(None, description="bcrypt hash, absent for Google accounts")
    avatar: Optional[str] = Field(None, description="Avatar URL")
    verified: bool = Field(default=False, description="Whether the email was confirmed")
    google: bool = Field(default=False, description="Registered through Google sign-in")
    created_at: Optional[datetime] = Field(None, description="Account creation time")

    model_config = {"extra": "ignore"}

    def to_public(self) -> "PublicUser":
        return PublicUser(**self.model_dump(exclude={"password"}))


class PublicUser(BaseModel):
    """User as returned by the API; never carries the password hash."""

    id: str
    display: str
    email: EmailStr
    avatar: Optional[str] = None
    verified: bool = False
    google: bool = False
    created_at: Optional[datetime] = None


class Author(BaseModel):
    """Minimal author info attached to catalog search results."""

    id: str
    display: str


class GoogleClaims(BaseModel):
    """Profile fields taken from a verified Google ID token."""

    name: Optional[str] = None
    email: Optional[str] = None
    picture: Optional[str] = None

    model_config = {"extra": "ignore"}

    @property
    def complete(self) -> bool:
        return bool(self.name and self.email and self.picture)


class GoogleTicket:
    """A verified Google ID token."""

    def __init__(self, payload: dict[str, Any]):
        self._payload = dict(payload)

    def claims(self) -> GoogleClaims:
        return GoogleClaims(**self._payload)


class OAuthTokenRequest(BaseModel):
    """Body for the Google registration and login endpoints."""

    token: Optional[str] = None


class LoginRequest(BaseModel):
    """Body for local login."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Successful login: the user and the credential that was also attached."""

    user: PublicUser
    token: str


class VerificationStatus(BaseModel):
    """Returned by the verification endpoint."""

    user_id: str = Field(..., serialization_alias="userId")
    verified: bool


class UserSearchResponse(BaseModel):
    """Page of user search results."""

    model_config = ConfigDict(populate_by_name=True)

    total_records: int = Field(..., serialization_alias="totalRecords")
    filtered_records: int = Field(..., serialization_alias="filteredRecords")
    users: list[PublicUser]
