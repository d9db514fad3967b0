"""
Users module interfaces.

The registration and login services depend on these protocols rather than
on Supabase, bcrypt or Google directly.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from shared.models import SearchQuery

from .models import GoogleTicket, User


@runtime_checkable
class IUserRepository(Protocol):
    """Persistence for user records."""

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Return the user, or None if there is no such ID."""
        ...

    def find_by_email(self, email: str) -> Optional[User]:
        """Return the user registered with ``email``, or None."""
        ...

    def find_by_ids(self, user_ids: list[str]) -> list[User]:
        """Return the users that exist among ``user_ids``."""
        ...

    def create(self, data: dict[str, Any]) -> User:
        """
        Insert a new user.

        Raises:
            DuplicateRecordError: If the email is already registered.
        """
        ...

    def find(self, query: SearchQuery) -> tuple[int, list[User]]:
        """Return the total match count and the requested page."""
        ...


@runtime_checkable
class IPasswordHasher(Protocol):
    """One-way password hashing."""

    def hash(self, plaintext: str) -> str:
        ...

    def compare(self, plaintext: str, hashed: str) -> bool:
        ...


@runtime_checkable
class IIdentityVerifier(Protocol):
    """Verifies third-party (Google) ID tokens."""

    def verify_token(self, token: str) -> GoogleTicket:
        """
        Raises:
            OAuthVerificationError: If the token is invalid, expired or
                cannot be checked.
        """
        ...
