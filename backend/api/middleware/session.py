"""
Session middleware.

A SessionGuard is attached to every router on a surface (header transport
for the machine-facing API, cookie transport for the browser). For each
request it:

1. lets exempt paths (registration, login, password reset) straight through;
2. extracts the credential from the surface's transport;
3. refreshes it, writing the replacement to the response;
4. decodes the original credential to find the user;
5. unless the path is the verification endpoint, requires a verified account;
6. stores the identity on ``request.state.identity``.

Any rejection raises an AuthenticationError/AuthorizationError, which the
application error handler turns into a 401 before any route code runs.
"""

import logging
from functools import partial
from typing import Optional, Sequence

from fastapi import Depends, Request, Response
from starlette.concurrency import run_in_threadpool

from modules.auth.exceptions import (
    InvalidTokenError,
    MissingTokenError,
    UnverifiedAccountError,
    VerificationLookupError,
)
from modules.auth.interfaces import ICredentialTransport
from shared.models import RequestIdentity

from ..dependencies import ServiceContainer, get_container

logger = logging.getLogger(__name__)

EXEMPT_PREFIXES = ("/register", "/login")
EXEMPT_FRAGMENTS = ("/forgotPassword",)
VERIFICATION_FRAGMENT = "/verify"


class SessionGuard:
    """
    FastAPI dependency gating every route of one surface.

    Args:
        transport: Where the credential travels on this surface.
        prefix: Mount prefix of the surface; exemptions are matched on the
            path below it.
    """

    def __init__(
        self,
        transport: ICredentialTransport,
        prefix: str = "",
        exempt_prefixes: Sequence[str] = EXEMPT_PREFIXES,
        exempt_fragments: Sequence[str] = EXEMPT_FRAGMENTS,
        verification_fragment: str = VERIFICATION_FRAGMENT,
    ):
        self.transport = transport
        self.prefix = prefix.rstrip("/")
        self.exempt_prefixes = tuple(exempt_prefixes)
        self.exempt_fragments = tuple(exempt_fragments)
        self.verification_fragment = verification_fragment

    def relative_path(self, path: str) -> str:
        if self.prefix and path.startswith(self.prefix):
            return path[len(self.prefix):] or "/"
        return path

    def is_exempt(self, path: str) -> bool:
        relative = self.relative_path(path)
        return relative.startswith(self.exempt_prefixes) or any(
            fragment in relative for fragment in self.exempt_fragments
        )

    async def __call__(
        self,
        request: Request,
        response: Response,
        container: ServiceContainer = Depends(get_container),
    ) -> Optional[RequestIdentity]:
        request.state.credential_transport = self.transport
        path = request.url.path

        if self.is_exempt(path):
            return None

        token = self.transport.extract(request)
        if not token:
            raise MissingTokenError()

        codec = container.codec
        if not codec.refresh(token, partial(self.transport.attach, response)):
            raise InvalidTokenError()

        claims = codec.verify(token)
        if claims is None:
            # Expired between the two calls
            raise InvalidTokenError()
        user_id = claims.user_id

        if self.verification_fragment not in self.relative_path(path):
            await self._require_verified(container, user_id)

        identity = RequestIdentity(user_id=user_id)
        request.state.identity = identity
        return identity

    async def _require_verified(self, container: ServiceContainer, user_id: str) -> None:
        try:
            user = await run_in_threadpool(container.users.find_by_id, user_id)
        except Exception:
            logger.exception("Verification lookup failed for user %s", user_id)
            raise VerificationLookupError(user_id)

        if user is None or not user.verified:
            raise UnverifiedAccountError(user_id)


def get_request_identity(request: Request) -> RequestIdentity:
    """
    Dependency returning the identity attached by the session guard.

    Usage:
        @router.get("/protected")
        async def protected_route(identity: RequestIdentity = Depends(get_request_identity)):
            return {"user_id": identity.user_id}
    """
    identity = getattr(request.state, "identity", None)
    if identity is None:
        raise MissingTokenError()
    return identity


def get_request_transport(request: Request) -> ICredentialTransport:
    """Dependency returning the credential transport of the surface being served."""
    transport = getattr(request.state, "credential_transport", None)
    if transport is None:
        raise RuntimeError("Route is not mounted behind a SessionGuard")
    return transport


# Type alias for cleaner route definitions
RequireIdentity = Depends(get_request_identity)
