"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its collaborators through an
interface, and this file creates the concrete implementations.

Tests build a ServiceContainer with fakes and install it through
``app.dependency_overrides[get_container]``.
"""

from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from fastapi import Depends, Query

from shared.config import Settings, get_settings
from shared.models import SearchQuery

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import ICredentialCodec
    from modules.recipes.interfaces import IIngredientRepository, IRecipeRepository
    from modules.recipes.service import CatalogService
    from modules.users.interfaces import IIdentityVerifier, IPasswordHasher, IUserRepository
    from modules.users.service import LoginService, RegistrationService, UserService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access, so a
    missing database or signing secret only fails the requests that need it.

    Any collaborator can be supplied up front, which is how tests swap in
    fakes for Supabase, bcrypt and Google.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        users: "IUserRepository | None" = None,
        hasher: "IPasswordHasher | None" = None,
        verifier: "IIdentityVerifier | None" = None,
        codec: "ICredentialCodec | None" = None,
        ingredients: "IIngredientRepository | None" = None,
        recipes: "IRecipeRepository | None" = None,
    ) -> None:
        self._settings = settings
        self._users = users
        self._hasher = hasher
        self._verifier = verifier
        self._codec = codec
        self._ingredients = ingredients
        self._recipes = recipes

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def users(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._users is None:
            from modules.users.repository import UserRepository
            from shared.database import get_supabase_client
            self._users = UserRepository(get_supabase_client())
        return self._users

    @property
    def ingredients(self) -> "IIngredientRepository":
        """Get the ingredient repository instance."""
        if self._ingredients is None:
            from modules.recipes.repository import IngredientRepository
            from shared.database import get_supabase_client
            self._ingredients = IngredientRepository(get_supabase_client())
        return self._ingredients

    @property
    def recipes(self) -> "IRecipeRepository":
        """Get the recipe repository instance."""
        if self._recipes is None:
            from modules.recipes.repository import RecipeRepository
            from shared.database import get_supabase_client
            self._recipes = RecipeRepository(get_supabase_client())
        return self._recipes

    @property
    def hasher(self) -> "IPasswordHasher":
        if self._hasher is None:
            from modules.users.passwords import BcryptHasher
            self._hasher = BcryptHasher()
        return self._hasher

    @property
    def verifier(self) -> "IIdentityVerifier":
        if self._verifier is None:
            from modules.users.oauth import GoogleTokenVerifier
            self._verifier = GoogleTokenVerifier(self.settings.google_client_id)
        return self._verifier

    @property
    def codec(self) -> "ICredentialCodec":
        """
        Get the credential codec.

        Raises:
            AuthNotConfiguredError: If no JWT_SECRET is set.
        """
        if self._codec is None:
            from modules.auth.codec import CredentialCodec
            from modules.auth.exceptions import AuthNotConfiguredError
            from modules.auth.models import CodecConfig

            settings = self.settings
            if not settings.jwt_secret:
                raise AuthNotConfiguredError()
            self._codec = CredentialCodec(
                CodecConfig(
                    secret=settings.jwt_secret,
                    ttl=timedelta(minutes=settings.jwt_ttl_minutes),
                    algorithm=settings.jwt_algorithm,
                )
            )
        return self._codec

    @property
    def registration(self) -> "RegistrationService":
        from modules.users.service import RegistrationService
        return RegistrationService(self.users, self.hasher, self.verifier)

    @property
    def login(self) -> "LoginService":
        from modules.users.service import LoginService
        return LoginService(self.users, self.hasher, self.verifier, self.codec)

    @property
    def user_service(self) -> "UserService":
        from modules.users.service import UserService
        return UserService(self.users)

    @property
    def catalog(self) -> "CatalogService":
        from modules.recipes.service import CatalogService
        return CatalogService(self.ingredients, self.recipes, self.users)

    def reset(self) -> None:
        """
        Reset all cached collaborators.

        This is primarily for testing - allows tests to get fresh
        instances with different settings.
        """
        self._settings = None
        self._users = None
        self._hasher = None
        self._verifier = None
        self._codec = None
        self._ingredients = None
        self._recipes = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_registration_service(
    container: ServiceContainer = Depends(get_container),
) -> "RegistrationService":
    """FastAPI dependency for the registration service."""
    return container.registration


def get_login_service(
    container: ServiceContainer = Depends(get_container),
) -> "LoginService":
    """FastAPI dependency for the login service."""
    return container.login


def get_user_service(
    container: ServiceContainer = Depends(get_container),
) -> "UserService":
    """FastAPI dependency for the user service."""
    return container.user_service


def get_catalog_service(
    container: ServiceContainer = Depends(get_container),
) -> "CatalogService":
    """FastAPI dependency for the recipe/ingredient catalog."""
    return container.catalog


def get_search_query(
    name: Optional[str] = Query(default=None, description="Substring of the name"),
    tag: Optional[str] = Query(default=None, description="Only records with this tag"),
    author: Optional[str] = Query(default=None, description="Only records by this user"),
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=20, ge=1, le=100, description="Records per page"),
) -> SearchQuery:
    """FastAPI dependency collecting the search query parameters."""
    return SearchQuery(name=name, tag=tag, author=author, page=page, limit=limit)
