"""
Recipe and ingredient API endpoints.

Searching and reading is open to everyone (``public_router``); creating
requires a logged-in, verified user (``router``, mounted behind the
session guard).
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends

from api.dependencies import get_catalog_service, get_search_query
from api.middleware.session import get_request_identity
from shared.models import RequestIdentity, SearchQuery

from .models import (
    CreateIngredientRequest,
    CreateRecipeRequest,
    Ingredient,
    IngredientSearchResponse,
    Recipe,
    RecipeListItem,
    RecipeSearchResponse,
)
from .service import CatalogService

public_router = APIRouter()
router = APIRouter()


@public_router.get("/ingredients/", response_model=IngredientSearchResponse)
async def search_ingredients(
    query: SearchQuery = Depends(get_search_query),
    service: CatalogService = Depends(get_catalog_service),
) -> IngredientSearchResponse:
    """Search ingredients; each result names its author."""
    return await service.search_ingredients(query)


@public_router.get("/recipes/", response_model=RecipeSearchResponse)
async def search_recipes(
    query: SearchQuery = Depends(get_search_query),
    service: CatalogService = Depends(get_catalog_service),
) -> RecipeSearchResponse:
    """Search recipes by name, tag or author."""
    return await service.search_recipes(query)


@public_router.get("/recipes/{recipe_id}", response_model=RecipeListItem)
async def get_recipe(
    recipe_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> RecipeListItem:
    return await service.get_recipe(recipe_id)


@router.post("/ingredients/", response_model=Ingredient)
async def create_ingredient(
    request: Optional[CreateIngredientRequest] = Body(default=None),
    identity: RequestIdentity = Depends(get_request_identity),
    service: CatalogService = Depends(get_catalog_service),
) -> Ingredient:
    """
    Create an ingredient authored by the current user.

    Requires authentication.
    """
    return await service.create_ingredient(identity.user_id, request)


@router.post("/recipes/", response_model=Recipe, status_code=201)
async def create_recipe(
    request: CreateRecipeRequest,
    identity: RequestIdentity = Depends(get_request_identity),
    service: CatalogService = Depends(get_catalog_service),
) -> Recipe:
    """
    Create a recipe authored by the current user.

    Requires authentication.
    """
    return await service.create_recipe(identity.user_id, request)
