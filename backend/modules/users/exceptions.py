"""
Users module exceptions.
"""

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    ShareError,
    ValidationError,
)


class RegistrationValidationError(ValidationError):
    """
    Raised when a registration body is incomplete or malformed.

    Reported to the client with HTTP 200 and an ``error`` body; existing
    clients read the body rather than the status.
    """

    status_code = 200

    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message,
            code="REGISTRATION_INVALID",
            details={"field": field} if field else None,
        )
        self.field = field


class OAuthVerificationError(ExternalServiceError):
    """Raised when Google rejects the ID token or cannot be reached."""

    def __init__(self, message: str = "Failed to validate authenticity of OAuth token"):
        super().__init__(message, service="google", code="OAUTH_INVALID")


class InvalidCredentialsError(AuthenticationError):
    """Raised when login details do not match a user."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class UserNotFoundError(NotFoundError):
    """Raised when a user ID does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class EmailTakenError(ConflictError):
    """Raised when registering an email that already has an account."""

    def __init__(self, message: str):
        super().__init__(message, code="EMAIL_TAKEN")


class UserSearchFailedError(ShareError):
    """Raised when a user search query cannot be executed."""

    status_code = 422

    def __init__(self):
        super().__init__("Failed to execute query", code="SEARCH_FAILED")
