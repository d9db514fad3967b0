"""
Recipes module.

Handles searching, reading and creating recipes and ingredients.

Public API:
- CatalogService: search/read/create operations
- IIngredientRepository, IRecipeRepository: persistence interfaces
- Recipe, Ingredient and their search responses
"""

from .interfaces import IIngredientRepository, IRecipeRepository
from .models import (
    Ingredient,
    IngredientListItem,
    IngredientSearchResponse,
    CreateIngredientRequest,
    Recipe,
    RecipeListItem,
    RecipeSearchResponse,
    CreateRecipeRequest,
)
from .exceptions import (
    SearchFailedError,
    MissingIngredientNameError,
    IngredientCreateError,
    RecipeCreateError,
    RecipeNotFoundError,
)

__all__ = [
    # Interfaces
    "IIngredientRepository",
    "IRecipeRepository",
    # Models
    "Ingredient",
    "IngredientListItem",
    "IngredientSearchResponse",
    "CreateIngredientRequest",
    "Recipe",
    "RecipeListItem",
    "RecipeSearchResponse",
    "CreateRecipeRequest",
    # Exceptions
    "SearchFailedError",
    "MissingIngredientNameError",
    "IngredientCreateError",
    "RecipeCreateError",
    "RecipeNotFoundError",
]
