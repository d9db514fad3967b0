"""
Users module.

Handles user records, registration (local and Google) and login.

Public API:
- RegistrationService, LoginService, UserService
- IUserRepository, IPasswordHasher, IIdentityVerifier: collaborator interfaces
- User, PublicUser, Author, GoogleTicket: models
- User exceptions: RegistrationValidationError, EmailTakenError, etc.
"""

from .interfaces import IUserRepository, IPasswordHasher, IIdentityVerifier
from .models import (
    User,
    PublicUser,
    Author,
    GoogleClaims,
    GoogleTicket,
    LoginRequest,
    LoginResponse,
    VerificationStatus,
    UserSearchResponse,
)
from .exceptions import (
    RegistrationValidationError,
    EmailTakenError,
    OAuthVerificationError,
    InvalidCredentialsError,
    UserNotFoundError,
    UserSearchFailedError,
)

__all__ = [
    # Interfaces
    "IUserRepository",
    "IPasswordHasher",
    "IIdentityVerifier",
    # Models
    "User",
    "PublicUser",
    "Author",
    "GoogleClaims",
    "GoogleTicket",
    "LoginRequest",
    "LoginResponse",
    "VerificationStatus",
    "UserSearchResponse",
    # Exceptions
    "RegistrationValidationError",
    "EmailTakenError",
    "OAuthVerificationError",
    "InvalidCredentialsError",
    "UserNotFoundError",
    "UserSearchFailedError",
]
