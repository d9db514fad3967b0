"""
Credential codec.

Mints and validates the HS256 JWTs that identify a logged-in user.
Credentials are stateless: nothing is stored server-side, so a token stays
usable until it expires and every successful refresh pushes that expiry
out by another TTL.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

import jwt
import pydantic

from .interfaces import ICredentialCodec, TokenCarrier
from .models import CodecConfig, CredentialClaims

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CredentialCodec(ICredentialCodec):
    """
    JWT implementation of ICredentialCodec.

    Args:
        config: Signing secret, TTL and algorithm.
        clock: Source of "now"; tests pass a fixed clock.
    """

    def __init__(
        self,
        config: CodecConfig,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._config = config
        self._clock = clock

    @property
    def config(self) -> CodecConfig:
        return self._config

    def mint(self, user_id: str) -> str:
        now = self._clock()
        payload = {
            "sub": user_id,
            "iat": int(now.timestamp()),
            "exp": int((now + self._config.ttl).timestamp()),
        }
        return jwt.encode(payload, self._config.secret, algorithm=self._config.algorithm)

    def verify(self, token: str) -> Optional[CredentialClaims]:
        if not token:
            return None

        try:
            payload = jwt.decode(
                token,
                self._config.secret,
                algorithms=[self._config.algorithm],
                options={"require": ["sub", "iat", "exp"], "verify_exp": False},
            )
            claims = CredentialClaims(**payload)
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected credential: %s", e)
            return None
        except pydantic.ValidationError as e:
            logger.debug("Rejected credential with bad claims: %s", e)
            return None

        # Expiry is checked against our own clock so a fixed clock works in tests
        if claims.exp <= int(self._clock().timestamp()):
            logger.debug("Rejected expired credential for user %s", claims.sub)
            return None
        return claims

    def refresh(self, token: str, attach: TokenCarrier) -> bool:
        claims = self.verify(token)
        if claims is None:
            return False

        attach(self.mint(claims.user_id))
        return True
