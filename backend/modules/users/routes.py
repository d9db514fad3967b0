"""
User-related endpoints.

``auth_router`` holds registration and login. It is mounted behind the
session guard like everything else, and its paths are on the guard's
exemption list. ``router`` holds the profile and verification endpoints,
which need a credential.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Response

from api.dependencies import (
    get_login_service,
    get_registration_service,
    get_search_query,
    get_user_service,
)
from api.middleware.session import get_request_identity, get_request_transport
from modules.auth.interfaces import ICredentialTransport
from shared.models import RequestIdentity, SearchQuery

from .models import (
    LoginRequest,
    LoginResponse,
    OAuthTokenRequest,
    PublicUser,
    UserSearchResponse,
    VerificationStatus,
)
from .service import LoginService, RegistrationService, UserService

auth_router = APIRouter()
router = APIRouter()


@auth_router.post("/register/", response_model=PublicUser)
async def register_local(
    body: Optional[dict[str, Any]] = Body(default=None),
    service: RegistrationService = Depends(get_registration_service),
) -> PublicUser:
    """
    Register with a display name, email and password.

    Validation problems come back as ``{"error": ...}`` with status 200;
    an email that is already registered is a 422.
    """
    return await service.register_local(body)


@auth_router.post("/register/google", response_model=PublicUser)
async def register_google(
    body: Optional[dict[str, Any]] = Body(default=None),
    service: RegistrationService = Depends(get_registration_service),
) -> PublicUser:
    """Register from a Google ID token."""
    return await service.register_google(body)


@auth_router.post("/login/", response_model=LoginResponse)
async def login_local(
    request: LoginRequest,
    response: Response,
    transport: ICredentialTransport = Depends(get_request_transport),
    service: LoginService = Depends(get_login_service),
) -> LoginResponse:
    """
    Log in with email and password.

    The credential is returned in the body and also attached the way this
    surface carries it (Authorization header or cookie).
    """
    user, token = await service.login_local(request.email, request.password)
    transport.attach(response, token)
    return LoginResponse(user=user, token=token)


@auth_router.post("/login/google", response_model=LoginResponse)
async def login_google(
    request: OAuthTokenRequest,
    response: Response,
    transport: ICredentialTransport = Depends(get_request_transport),
    service: LoginService = Depends(get_login_service),
) -> LoginResponse:
    """Log in with a Google ID token for an account registered through Google."""
    user, token = await service.login_google(request.token)
    transport.attach(response, token)
    return LoginResponse(user=user, token=token)


@router.get("/users/", response_model=UserSearchResponse)
async def search_users(
    query: SearchQuery = Depends(get_search_query),
    identity: RequestIdentity = Depends(get_request_identity),
    service: UserService = Depends(get_user_service),
) -> UserSearchResponse:
    """Search public profiles by display name."""
    return await service.search_users(query)


@router.get("/users/me", response_model=PublicUser)
async def get_current_user_profile(
    identity: RequestIdentity = Depends(get_request_identity),
    service: UserService = Depends(get_user_service),
) -> PublicUser:
    """
    Get the current user's profile.

    Requires authentication.
    """
    user = await service.get_user(identity.user_id)
    return user.to_public()


@router.get("/users/{user_id}", response_model=PublicUser)
async def get_user_profile(
    user_id: str,
    identity: RequestIdentity = Depends(get_request_identity),
    service: UserService = Depends(get_user_service),
) -> PublicUser:
    user = await service.get_user(user_id)
    return user.to_public()


@router.get("/account/verify", response_model=VerificationStatus)
async def get_verification_status(
    identity: RequestIdentity = Depends(get_request_identity),
    service: UserService = Depends(get_user_service),
) -> VerificationStatus:
    """
    Report whether the current account is verified.

    Reachable by unverified accounts; the email verification flow itself
    lives outside this service.
    """
    user = await service.get_user(identity.user_id)
    return VerificationStatus(user_id=user.id, verified=user.verified)
