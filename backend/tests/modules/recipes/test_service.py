"""Tests for the recipe/ingredient catalog service."""

import pytest
from postgrest.exceptions import APIError

from modules.recipes.exceptions import (
    IngredientCreateError,
    MissingIngredientNameError,
    RecipeNotFoundError,
    SearchFailedError,
)
from modules.recipes.models import (
    CreateIngredientRequest,
    CreateRecipeRequest,
    Ingredient,
    Recipe,
)
from modules.recipes.service import CatalogService
from shared.models import SearchQuery


@pytest.fixture
def service(ingredients, recipes, users):
    return CatalogService(ingredients, recipes, users)


@pytest.fixture
def alice(users):
    return users.add(id="alice-id", display="Alice", email="alice@example.com")


class TestIngredientSearch:
    @pytest.mark.asyncio
    async def test_results_carry_author(self, service, ingredients, alice):
        ingredients.rows = [
            Ingredient(id="i1", author=alice.id, name="Basil", image="basil.png"),
            Ingredient(id="i2", author=alice.id, name="Garlic"),
        ]

        result = await service.search_ingredients(SearchQuery())

        assert result.total_records == 2
        assert result.filtered_records == 2
        assert result.ingredients[0].author.id == "alice-id"
        assert result.ingredients[0].author.display == "Alice"

    @pytest.mark.asyncio
    async def test_source_rows_are_not_mutated(self, service, ingredients, alice):
        """Enrichment builds new records; stored rows keep the author ID."""
        row = Ingredient(id="i1", author=alice.id, name="Basil")
        ingredients.rows = [row]

        await service.search_ingredients(SearchQuery())

        assert ingredients.rows[0] is row
        assert row.author == "alice-id"

    @pytest.mark.asyncio
    async def test_unknown_author_is_none(self, service, ingredients):
        ingredients.rows = [Ingredient(id="i1", author="ghost", name="Basil")]
        result = await service.search_ingredients(SearchQuery())
        assert result.ingredients[0].author is None

    @pytest.mark.asyncio
    async def test_filtered_count_is_page_size(self, service, ingredients, alice):
        ingredients.rows = [
            Ingredient(id=f"i{n}", author=alice.id, name=f"Herb {n}") for n in range(5)
        ]
        result = await service.search_ingredients(SearchQuery(page=2, limit=2))
        assert result.total_records == 5
        assert result.filtered_records == 2

    @pytest.mark.asyncio
    async def test_query_failure(self, service, ingredients):
        ingredients.error = APIError({"message": "bad filter", "code": "42703"})
        with pytest.raises(SearchFailedError) as exc_info:
            await service.search_ingredients(SearchQuery())
        assert exc_info.value.status_code == 422
        assert exc_info.value.message == "Failed to execute query"


class TestCreateIngredient:
    @pytest.mark.asyncio
    async def test_create(self, service, ingredients):
        ingredient = await service.create_ingredient(
            "alice-id", CreateIngredientRequest(name="Basil")
        )
        assert ingredient.author == "alice-id"
        assert ingredient.name == "Basil"
        assert ingredient.image == ""
        assert ingredients.rows == [ingredient]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("request_body", [None, CreateIngredientRequest(), CreateIngredientRequest(name="")])
    async def test_missing_name(self, service, ingredients, request_body):
        with pytest.raises(MissingIngredientNameError):
            await service.create_ingredient("alice-id", request_body)
        assert ingredients.rows == []

    @pytest.mark.asyncio
    async def test_database_refusal(self, service, ingredients):
        ingredients.error = APIError({"message": "foreign key violation", "code": "23503"})
        with pytest.raises(IngredientCreateError):
            await service.create_ingredient("alice-id", CreateIngredientRequest(name="Basil"))


class TestRecipes:
    @pytest.fixture
    def pesto(self, alice):
        return Recipe(
            id="r1",
            author=alice.id,
            name="Pesto",
            ingredients=["i1", "i2"],
            directions="Blend everything.",
            tags=["italian", "quick"],
            image="pesto.png",
        )

    @pytest.mark.asyncio
    async def test_search_by_tag(self, service, recipes, pesto, alice):
        recipes.rows = [
            pesto,
            Recipe(id="r2", author=alice.id, name="Stew", directions="Simmer.", image="stew.png"),
        ]
        result = await service.search_recipes(SearchQuery(tag="italian"))
        assert result.total_records == 1
        assert result.recipes[0].name == "Pesto"
        assert result.recipes[0].author.display == "Alice"

    @pytest.mark.asyncio
    async def test_get_recipe(self, service, recipes, pesto):
        recipes.rows = [pesto]
        recipe = await service.get_recipe("r1")
        assert recipe.name == "Pesto"
        assert recipe.author.id == "alice-id"
        assert recipe.ingredients == ["i1", "i2"]

    @pytest.mark.asyncio
    async def test_get_missing_recipe(self, service):
        with pytest.raises(RecipeNotFoundError) as exc_info:
            await service.get_recipe("missing")
        assert exc_info.value.message == "No result found"

    @pytest.mark.asyncio
    async def test_create_recipe(self, service, recipes):
        request = CreateRecipeRequest(
            name="Pesto", directions="Blend.", image="pesto.png", tags=["italian"], difficulty=2
        )
        recipe = await service.create_recipe("alice-id", request)

        assert recipe.author == "alice-id"
        assert recipe.num_hits == 0
        assert recipe.rating == 0
        assert recipe.difficulty == 2
        assert recipes.rows == [recipe]
