"""
Credential transports.

The machine-facing API carries the credential in the Authorization header;
the browser-facing surface keeps it in an HttpOnly cookie. Either way the
refreshed credential goes back the same way it came in.
"""

from typing import Optional

from fastapi import Request, Response

from .interfaces import ICredentialTransport


class HeaderTransport(ICredentialTransport):
    """``Authorization: Bearer <token>`` on requests and responses."""

    name = "header"
    header = "Authorization"
    scheme = "Bearer"

    def extract(self, request: Request) -> Optional[str]:
        value = request.headers.get(self.header)
        if not value:
            return None

        scheme, _, token = value.partition(" ")
        if scheme.lower() != self.scheme.lower() or not token.strip():
            return None
        return token.strip()

    def attach(self, response: Response, token: str) -> None:
        response.headers[self.header] = f"{self.scheme} {token}"


class CookieTransport(ICredentialTransport):
    """Named HttpOnly cookie, re-set with a fresh max-age on every refresh."""

    name = "cookie"

    def __init__(self, cookie_name: str = "token", max_age: int = 3600, secure: bool = False):
        self.cookie_name = cookie_name
        self.max_age = max_age
        self.secure = secure

    def extract(self, request: Request) -> Optional[str]:
        return request.cookies.get(self.cookie_name) or None

    def attach(self, response: Response, token: str) -> None:
        response.set_cookie(
            self.cookie_name,
            token,
            max_age=self.max_age,
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )
