"""
Authentication module exceptions.

These exceptions are raised by the session guard and caught by the
application error handler, which turns them into 401 responses.
"""

from shared.exceptions import AuthenticationError, AuthorizationError


class MissingTokenError(AuthenticationError):
    """Raised when no credential is presented on a protected path."""

    def __init__(self, message: str = "You must be logged in to perform this action"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    """Raised when a credential is malformed, badly signed or expired."""

    def __init__(self, message: str = "The passed authentication token is invalid"):
        super().__init__(message, code="INVALID_TOKEN")


class AuthNotConfiguredError(AuthenticationError):
    """Raised when no signing secret has been configured."""

    def __init__(self, message: str = "Server authentication not configured"):
        super().__init__(message, code="AUTH_NOT_CONFIGURED")


class UnverifiedAccountError(AuthorizationError):
    """Raised when a valid credential belongs to an unverified account."""

    def __init__(self, user_id: str):
        super().__init__(
            "Your account must be verified to perform this action",
            code="ACCOUNT_NOT_VERIFIED",
            details={"user_id": user_id},
        )


class VerificationLookupError(AuthorizationError):
    """Raised when the account could not be loaded to check verification."""

    def __init__(self, user_id: str):
        super().__init__(
            "Could not confirm account verification status",
            code="VERIFICATION_UNCONFIRMED",
            details={"user_id": user_id},
        )
