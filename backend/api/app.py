"""
FastAPI application factory.

Creates and configures the FastAPI application instance with its two
surfaces: ``/api`` (credential in the Authorization header) and ``/web``
(credential in a cookie).
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from modules.auth.transports import CookieTransport, HeaderTransport
from modules.recipes import routes as recipe_routes
from modules.users import routes as user_routes
from shared.config import Settings, get_settings
from shared.database import check_connection
from shared.exceptions import AuthenticationError, AuthorizationError, ShareError

from .middleware.session import SessionGuard
from .models.errors import ErrorResponse, ValidationErrorResponse
from .routes import health

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
WEB_PREFIX = "/web"

# Documented error bodies, rendered by share_error_handler
GUARDED_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Missing, invalid or unverified session"},
}
CATALOG_RESPONSES = {
    404: {"model": ErrorResponse, "description": "No such record"},
    422: {"model": ErrorResponse, "description": "Query or body rejected"},
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The database is required for every operation, so an unreachable
    database aborts startup.
    """
    settings = get_settings()
    try:
        check_connection()
    except Exception:
        logger.critical("Could not connect to database at %s", settings.database_url, exc_info=True)
        raise
    logger.info("Starting Recipe Share API on %s:%s", settings.host, settings.port)
    yield
    logger.info("Shutting down Recipe Share API")


async def share_error_handler(request: Request, exc: ShareError) -> JSONResponse:
    """Render any ShareError as ``{"error": message, "code": code}``."""
    headers = None
    if isinstance(exc, (AuthenticationError, AuthorizationError)):
        headers = {"WWW-Authenticate": "Bearer"}
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", exc.code, request.url.path, exc.message)
    body = ErrorResponse(**exc.to_dict())
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(), headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render body/query validation failures with an ``error`` field like every other error."""
    body = ValidationErrorResponse(detail=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=422, content=body.model_dump())


def build_guards(settings: Settings) -> tuple[SessionGuard, SessionGuard]:
    """Session guards for the header (API) and cookie (web) surfaces."""
    api_guard = SessionGuard(HeaderTransport(), prefix=API_PREFIX)
    web_guard = SessionGuard(
        CookieTransport(
            cookie_name=settings.token_cookie_name,
            max_age=settings.jwt_ttl_minutes * 60,
            secure=settings.ssl,
        ),
        prefix=WEB_PREFIX,
    )
    return api_guard, web_guard


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Recipe sharing API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
        expose_headers=["Authorization"],
    )

    app.add_exception_handler(ShareError, share_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    api_guard, web_guard = build_guards(settings)

    # Open routes
    app.include_router(health.router, prefix=API_PREFIX, tags=["health"])
    app.include_router(
        recipe_routes.public_router,
        prefix=API_PREFIX,
        tags=["catalog"],
        responses=CATALOG_RESPONSES,
    )

    # Machine-facing surface: Authorization header
    api_dependencies = [Depends(api_guard)]
    for router, tags in (
        (user_routes.auth_router, ["auth"]),
        (user_routes.router, ["users"]),
        (recipe_routes.router, ["catalog"]),
    ):
        app.include_router(
            router,
            prefix=API_PREFIX,
            tags=tags,
            dependencies=api_dependencies,
            responses=GUARDED_RESPONSES,
        )

    # Browser-facing surface: cookie
    web_dependencies = [Depends(web_guard)]
    for router in (user_routes.auth_router, user_routes.router):
        app.include_router(
            router,
            prefix=WEB_PREFIX,
            tags=["web"],
            dependencies=web_dependencies,
            responses=GUARDED_RESPONSES,
        )

    return app


# Application instance for uvicorn
app = create_app()
