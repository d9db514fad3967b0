"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pydantic import BaseModel, Field


@dataclass(frozen=True)
class CodecConfig:
    """
    Signing configuration for the credential codec.

    Built once from settings at startup and handed to the codec, which
    never looks at the environment itself.
    """

    secret: str
    ttl: timedelta = timedelta(hours=1)
    algorithm: str = "HS256"

    def __post_init__(self) -> None:
        if not self.secret:
            raise ValueError("Credential signing secret must not be empty")
        if self.ttl <= timedelta(0):
            raise ValueError("Credential TTL must be positive")


class CredentialClaims(BaseModel):
    """Decoded claims of a valid credential."""

    sub: str = Field(..., min_length=1, description="Subject (user ID)")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    model_config = {"frozen": True, "extra": "ignore"}

    @property
    def user_id(self) -> str:
        return self.sub

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)
