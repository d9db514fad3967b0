"""
Recipes module interfaces.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from shared.models import SearchQuery

from .models import Ingredient, Recipe


@runtime_checkable
class IIngredientRepository(Protocol):
    """Persistence for ingredients."""

    def find(self, query: SearchQuery) -> tuple[int, list[Ingredient]]:
        """Return the total match count and the requested page."""
        ...

    def create(self, data: dict[str, Any]) -> Ingredient:
        ...


@runtime_checkable
class IRecipeRepository(Protocol):
    """Persistence for recipes."""

    def find(self, query: SearchQuery) -> tuple[int, list[Recipe]]:
        """Return the total match count and the requested page."""
        ...

    def get_by_id(self, recipe_id: str) -> Optional[Recipe]:
        ...

    def create(self, data: dict[str, Any]) -> Recipe:
        ...
