"""
Registration and login services.

Registration creates the user record (local or Google); login checks an
existing user's credentials and mints the first session credential.
Blocking collaborators (Supabase, bcrypt, Google's JWKS endpoint) are run
in the threadpool so the event loop keeps serving other requests.
"""

import logging
from typing import Any, Optional

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from postgrest.exceptions import APIError
from starlette.concurrency import run_in_threadpool

from modules.auth.interfaces import ICredentialCodec
from shared.models import SearchQuery
from shared.repository import DuplicateRecordError

from .exceptions import (
    EmailTakenError,
    InvalidCredentialsError,
    OAuthVerificationError,
    RegistrationValidationError,
    UserNotFoundError,
    UserSearchFailedError,
)
from .interfaces import IIdentityVerifier, IPasswordHasher, IUserRepository
from .models import (
    DISPLAY_NAME_MAX_LENGTH,
    GoogleTicket,
    PublicUser,
    User,
    UserSearchResponse,
)

logger = logging.getLogger(__name__)

_email_adapter = TypeAdapter(EmailStr)


def validate_local_registration(body: Optional[dict[str, Any]]) -> None:
    """
    Check a local registration body, stopping at the first problem.

    Raises:
        RegistrationValidationError: Naming the missing or bad field.
    """
    if not body:
        raise RegistrationValidationError("No body included in request")

    for field in ("name", "password", "email"):
        if not body.get(field):
            raise RegistrationValidationError(f"No {field} included in request", field=field)

    name = body["name"]
    if not isinstance(name, str):
        raise RegistrationValidationError("Display name must be a string", field="name")
    if len(name) > DISPLAY_NAME_MAX_LENGTH:
        raise RegistrationValidationError(
            f"Display name must be between 1 and {DISPLAY_NAME_MAX_LENGTH} characters",
            field="name",
        )

    if not isinstance(body["password"], str):
        raise RegistrationValidationError("Password must be a string", field="password")

    try:
        _email_adapter.validate_python(body["email"])
    except PydanticValidationError:
        raise RegistrationValidationError("Email address is invalid", field="email")


class RegistrationService:
    """
    Creates user accounts.

    Both flows end in the same insert; a duplicate email surfaces as
    EmailTakenError with the database's validation message when it gave
    one and a flow-specific fallback otherwise.
    """

    def __init__(
        self,
        users: IUserRepository,
        hasher: IPasswordHasher,
        verifier: IIdentityVerifier,
    ):
        self._users = users
        self._hasher = hasher
        self._verifier = verifier

    async def register_local(self, body: Optional[dict[str, Any]]) -> PublicUser:
        """Register with display name, email and password."""
        validate_local_registration(body)

        hashword = await run_in_threadpool(self._hasher.hash, body["password"])
        user = await self._create(
            {"display": body["name"], "email": body["email"], "password": hashword},
            fallback="Duplicate email",
        )
        logger.info("Registered local user %s", user.id)
        return user.to_public()

    async def register_google(self, body: Optional[dict[str, Any]]) -> PublicUser:
        """Register from a Google ID token; the account has no password."""
        ticket = await self._verify_ticket(body)

        claims = ticket.claims()
        if not claims.complete:
            raise RegistrationValidationError("Failed to extract data from Google Login Ticket")

        user = await self._create(
            {
                "display": claims.name[:DISPLAY_NAME_MAX_LENGTH],
                "email": claims.email,
                "avatar": claims.picture,
                "google": True,
            },
            fallback="Already registered using Google",
        )
        logger.info("Registered Google user %s", user.id)
        return user.to_public()

    async def _verify_ticket(self, body: Optional[dict[str, Any]]) -> GoogleTicket:
        token = (body or {}).get("token")
        if not token or not isinstance(token, str):
            raise RegistrationValidationError("No OAuth token included in request", field="token")

        try:
            return await run_in_threadpool(self._verifier.verify_token, token)
        except OAuthVerificationError:
            raise RegistrationValidationError("Failed to validate authenticity of OAuth token")
        except Exception:
            logger.exception("Google token verification failed unexpectedly")
            raise RegistrationValidationError("Failed to validate authenticity of OAuth token")

    async def _create(self, data: dict[str, Any], fallback: str) -> User:
        try:
            return await run_in_threadpool(self._users.create, data)
        except DuplicateRecordError as e:
            raise EmailTakenError(e.message_or(fallback))


class LoginService:
    """Checks credentials for an existing account and mints a session credential."""

    def __init__(
        self,
        users: IUserRepository,
        hasher: IPasswordHasher,
        verifier: IIdentityVerifier,
        codec: ICredentialCodec,
    ):
        self._users = users
        self._hasher = hasher
        self._verifier = verifier
        self._codec = codec

    async def login_local(self, email: str, password: str) -> tuple[PublicUser, str]:
        user = await run_in_threadpool(self._users.find_by_email, email)
        if user is None or not user.password:
            raise InvalidCredentialsError()

        matches = await run_in_threadpool(self._hasher.compare, password, user.password)
        if not matches:
            raise InvalidCredentialsError()

        logger.info("Local login for user %s", user.id)
        return user.to_public(), self._codec.mint(user.id)

    async def login_google(self, token: Optional[str]) -> tuple[PublicUser, str]:
        if not token:
            raise InvalidCredentialsError("No OAuth token included in request")

        try:
            ticket = await run_in_threadpool(self._verifier.verify_token, token)
        except OAuthVerificationError as e:
            raise InvalidCredentialsError(e.message)
        except Exception:
            logger.exception("Google token verification failed unexpectedly")
            raise InvalidCredentialsError("Failed to validate authenticity of OAuth token")

        claims = ticket.claims()
        user = None
        if claims.email:
            user = await run_in_threadpool(self._users.find_by_email, claims.email)
        if user is None or not user.google:
            raise InvalidCredentialsError("No account registered with this Google account")

        logger.info("Google login for user %s", user.id)
        return user.to_public(), self._codec.mint(user.id)


class UserService:
    """Read access to user profiles."""

    def __init__(self, users: IUserRepository):
        self._users = users

    async def get_user(self, user_id: str) -> User:
        try:
            user = await run_in_threadpool(self._users.find_by_id, user_id)
        except APIError as e:
            # e.g. an ID that is not a UUID
            logger.info("User lookup for %r failed: %s", user_id, e.message)
            raise UserNotFoundError(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def search_users(self, query: SearchQuery) -> UserSearchResponse:
        """Page of public profiles whose display name matches ``query.name``."""
        try:
            total, users = await run_in_threadpool(self._users.find, query)
        except APIError as e:
            logger.warning("User search failed: %s", e.message)
            raise UserSearchFailedError()

        items = [user.to_public() for user in users]
        return UserSearchResponse(
            total_records=total,
            filtered_records=len(items),
            users=items,
        )
