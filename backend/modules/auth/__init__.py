"""
Authentication module.

Handles credential minting, validation and transport.

Public API:
- ICredentialCodec / CredentialCodec: mint, verify and refresh credentials
- ICredentialTransport: HeaderTransport and CookieTransport
- CodecConfig, CredentialClaims: models
- Auth exceptions: MissingTokenError, InvalidTokenError, etc.
"""

from .interfaces import ICredentialCodec, ICredentialTransport, TokenCarrier
from .models import CodecConfig, CredentialClaims
from .codec import CredentialCodec
from .transports import HeaderTransport, CookieTransport
from .exceptions import (
    MissingTokenError,
    InvalidTokenError,
    AuthNotConfiguredError,
    UnverifiedAccountError,
    VerificationLookupError,
)

__all__ = [
    # Interfaces
    "ICredentialCodec",
    "ICredentialTransport",
    "TokenCarrier",
    # Models
    "CodecConfig",
    "CredentialClaims",
    # Implementations
    "CredentialCodec",
    "HeaderTransport",
    "CookieTransport",
    # Exceptions
    "MissingTokenError",
    "InvalidTokenError",
    "AuthNotConfiguredError",
    "UnverifiedAccountError",
    "VerificationLookupError",
]
