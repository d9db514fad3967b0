"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Helpers that tests import directly live in tests/fakes.py.
"""

import pytest
from datetime import timedelta
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, get_container, reset_container
from modules.auth.codec import CredentialCodec
from modules.auth.models import CodecConfig
from modules.users.passwords import BcryptHasher
from shared.config import Settings

from tests.fakes import (
    TEST_JWT_SECRET,
    FakeGoogleVerifier,
    FakeIngredientRepository,
    FakeRecipeRepository,
    FakeUserRepository,
)


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def settings() -> Settings:
    return Settings(jwt_secret=TEST_JWT_SECRET, google_client_id="test-client-id")


@pytest.fixture
def codec() -> CredentialCodec:
    return CredentialCodec(CodecConfig(secret=TEST_JWT_SECRET, ttl=timedelta(hours=1)))


@pytest.fixture
def hasher() -> BcryptHasher:
    # Lowest cost bcrypt accepts, keeps the suite fast
    return BcryptHasher(rounds=4)


@pytest.fixture
def users() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def verifier() -> FakeGoogleVerifier:
    return FakeGoogleVerifier()


@pytest.fixture
def ingredients() -> FakeIngredientRepository:
    return FakeIngredientRepository()


@pytest.fixture
def recipes() -> FakeRecipeRepository:
    return FakeRecipeRepository()


@pytest.fixture
def container(settings, users, hasher, verifier, codec, ingredients, recipes) -> ServiceContainer:
    return ServiceContainer(
        settings=settings,
        users=users,
        hasher=hasher,
        verifier=verifier,
        codec=codec,
        ingredients=ingredients,
        recipes=recipes,
    )


@pytest.fixture
def app(container):
    """Create a fresh app wired to the fake container."""
    app = create_app()
    app.dependency_overrides[get_container] = lambda: container
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def verified_user(users, test_user_id):
    return users.add(id=test_user_id, verified=True)


@pytest.fixture
def auth_token(codec, test_user_id) -> str:
    """Create a valid credential for the test user."""
    return codec.mint(test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
