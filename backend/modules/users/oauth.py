"""
Google ID-token verification.

Tokens are RS256 JWTs signed with one of Google's rotating keys, which are
fetched (and cached) from the public JWKS endpoint.
"""

import logging

import jwt
from jwt import PyJWKClient
from jwt.exceptions import PyJWKClientError

from .exceptions import OAuthVerificationError
from .interfaces import IIdentityVerifier
from .models import GoogleTicket

logger = logging.getLogger(__name__)

GOOGLE_CERTS_URL = "https://www.googleapis.com/oauth2/v3/certs"
GOOGLE_ISSUERS = ["accounts.google.com", "https://accounts.google.com"]


class GoogleTokenVerifier(IIdentityVerifier):
    """
    Verifies Google ID tokens issued for our OAuth client.

    Args:
        client_id: The OAuth client ID the token must be issued for.
        jwk_client: Optional pre-built JWKS client (tests pass a fake).
    """

    def __init__(self, client_id: str, jwk_client: PyJWKClient | None = None):
        self._client_id = client_id
        self._jwk_client = jwk_client or PyJWKClient(GOOGLE_CERTS_URL)

    def verify_token(self, token: str) -> GoogleTicket:
        if not self._client_id:
            raise OAuthVerificationError("Google sign-in is not configured")

        try:
            signing_key = self._jwk_client.get_signing_key_from_jwt(token).key
            payload = jwt.decode(
                token,
                signing_key,
                algorithms=["RS256"],
                audience=self._client_id,
                issuer=GOOGLE_ISSUERS,
                leeway=60,
            )
        except PyJWKClientError as e:
            logger.warning("Could not fetch Google signing keys: %s", e)
            raise OAuthVerificationError() from e
        except jwt.InvalidTokenError as e:
            logger.info("Rejected Google ID token: %s", e)
            raise OAuthVerificationError() from e

        return GoogleTicket(payload)
