"""
Authentication module interface.

Other modules should depend on ICredentialCodec and ICredentialTransport,
not the concrete implementations. This enables testing with fakes.
"""

from typing import Callable, Optional, Protocol, runtime_checkable

from fastapi import Request, Response

from .models import CredentialClaims


# Receives the replacement credential produced by a refresh
TokenCarrier = Callable[[str], None]


@runtime_checkable
class ICredentialCodec(Protocol):
    """Mints and validates signed, expiring credentials."""

    def mint(self, user_id: str) -> str:
        """
        Produce a new signed credential for ``user_id``.

        The expiry is the codec's TTL from now.
        """
        ...

    def verify(self, token: str) -> Optional[CredentialClaims]:
        """
        Check signature and expiry.

        Returns:
            The claims if the token is valid, None otherwise.
        """
        ...

    def refresh(self, token: str, attach: TokenCarrier) -> bool:
        """
        Re-validate ``token`` and hand a replacement to ``attach``.

        Returns:
            True if a replacement was issued, False if ``token`` was invalid
            (in which case ``attach`` is not called).
        """
        ...


@runtime_checkable
class ICredentialTransport(Protocol):
    """Where a credential travels between client and server."""

    name: str

    def extract(self, request: Request) -> Optional[str]:
        """Return the presented credential, or None if there is none."""
        ...

    def attach(self, response: Response, token: str) -> None:
        """Write ``token`` to the outgoing response."""
        ...
