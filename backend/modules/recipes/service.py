"""
Catalog service for recipes and ingredients.

Search results are returned as new list items carrying the author's
display info; the rows loaded from the repositories are left untouched.
"""

import logging
from typing import Iterable, Optional

from postgrest.exceptions import APIError
from starlette.concurrency import run_in_threadpool

from modules.users.interfaces import IUserRepository
from modules.users.models import Author
from shared.models import SearchQuery
from shared.repository import DuplicateRecordError

from .exceptions import (
    IngredientCreateError,
    MissingIngredientNameError,
    RecipeCreateError,
    RecipeNotFoundError,
    SearchFailedError,
)
from .interfaces import IIngredientRepository, IRecipeRepository
from .models import (
    CreateIngredientRequest,
    CreateRecipeRequest,
    Ingredient,
    IngredientListItem,
    IngredientSearchResponse,
    Recipe,
    RecipeListItem,
    RecipeSearchResponse,
)

logger = logging.getLogger(__name__)


class CatalogService:
    """Search, read and create recipes and ingredients."""

    def __init__(
        self,
        ingredients: IIngredientRepository,
        recipes: IRecipeRepository,
        users: IUserRepository,
    ):
        self._ingredients = ingredients
        self._recipes = recipes
        self._users = users

    # -------------------------------------------------------------------------
    # Ingredients
    # -------------------------------------------------------------------------

    async def search_ingredients(self, query: SearchQuery) -> IngredientSearchResponse:
        try:
            total, rows = await run_in_threadpool(self._ingredients.find, query)
            authors = await self._authors_for(row.author for row in rows)
        except APIError as e:
            logger.warning("Ingredient search failed: %s", e.message)
            raise SearchFailedError("ingredients")

        items = [
            IngredientListItem(
                id=row.id,
                name=row.name,
                author=authors.get(row.author),
                created_at=row.created_at,
            )
            for row in rows
        ]
        return IngredientSearchResponse(
            total_records=total,
            filtered_records=len(items),
            ingredients=items,
        )

    async def create_ingredient(
        self, user_id: str, request: Optional[CreateIngredientRequest]
    ) -> Ingredient:
        if request is None or not request.name:
            raise MissingIngredientNameError()

        data = {"author": user_id, "name": request.name, "image": request.image or ""}
        try:
            return await run_in_threadpool(self._ingredients.create, data)
        except (DuplicateRecordError, APIError) as e:
            logger.info("Ingredient create refused for user %s: %s", user_id, e)
            raise IngredientCreateError()

    # -------------------------------------------------------------------------
    # Recipes
    # -------------------------------------------------------------------------

    async def search_recipes(self, query: SearchQuery) -> RecipeSearchResponse:
        try:
            total, rows = await run_in_threadpool(self._recipes.find, query)
            authors = await self._authors_for(row.author for row in rows)
        except APIError as e:
            logger.warning("Recipe search failed: %s", e.message)
            raise SearchFailedError("recipes")

        items = [self._recipe_item(row, authors.get(row.author)) for row in rows]
        return RecipeSearchResponse(
            total_records=total,
            filtered_records=len(items),
            recipes=items,
        )

    async def get_recipe(self, recipe_id: str) -> RecipeListItem:
        try:
            recipe = await run_in_threadpool(self._recipes.get_by_id, recipe_id)
        except APIError as e:
            # e.g. an ID that is not a UUID
            logger.info("Recipe lookup for %r failed: %s", recipe_id, e.message)
            raise RecipeNotFoundError(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)

        authors = await self._authors_for([recipe.author])
        return self._recipe_item(recipe, authors.get(recipe.author))

    async def create_recipe(self, user_id: str, request: CreateRecipeRequest) -> Recipe:
        data = {"author": user_id, **request.model_dump()}
        try:
            return await run_in_threadpool(self._recipes.create, data)
        except DuplicateRecordError as e:
            raise RecipeCreateError(e.message_or("Failed to create a recipe with provided properties"))
        except APIError as e:
            logger.info("Recipe create refused for user %s: %s", user_id, e.message)
            raise RecipeCreateError()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _authors_for(self, author_ids: Iterable[str]) -> dict[str, Author]:
        unique_ids = sorted(set(author_ids))
        users = await run_in_threadpool(self._users.find_by_ids, unique_ids)
        return {user.id: Author(id=user.id, display=user.display) for user in users}

    @staticmethod
    def _recipe_item(recipe: Recipe, author: Optional[Author]) -> RecipeListItem:
        return RecipeListItem(**recipe.model_dump(exclude={"author"}), author=author)
