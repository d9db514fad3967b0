"""
Recipe and ingredient repositories.

Encapsulates all Supabase queries for the ``recipes`` and ``ingredients``
tables, including the filter mapping used by the search endpoints.
"""

from typing import Any, Optional

from shared.models import SearchQuery
from shared.repository import BaseRepository

from .models import Ingredient, Recipe


class IngredientRepository(BaseRepository[Ingredient]):
    """Repository for ingredient data access."""

    table = "ingredients"

    def find(self, query: SearchQuery) -> tuple[int, list[Ingredient]]:
        builder = self._db.table(self.table).select("*", count="exact")
        if query.name:
            builder = builder.ilike("name", f"%{query.name}%")
        if query.author:
            builder = builder.eq("author", query.author)

        start, end = self._page_range(query.page, query.limit)
        result = builder.order("name").range(start, end).execute()
        return result.count or 0, [Ingredient(**row) for row in result.data]

    def create(self, data: dict[str, Any]) -> Ingredient:
        return Ingredient(**self._insert(data))


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipe data access."""

    table = "recipes"

    def find(self, query: SearchQuery) -> tuple[int, list[Recipe]]:
        builder = self._db.table(self.table).select("*", count="exact")
        if query.name:
            builder = builder.ilike("name", f"%{query.name}%")
        if query.tag:
            builder = builder.contains("tags", [query.tag])
        if query.author:
            builder = builder.eq("author", query.author)

        start, end = self._page_range(query.page, query.limit)
        result = builder.order("date_created", desc=True).range(start, end).execute()
        return result.count or 0, [Recipe(**row) for row in result.data]

    def get_by_id(self, recipe_id: str) -> Optional[Recipe]:
        result = self._db.table(self.table).select("*").eq("id", recipe_id).execute()
        if not result.data:
            return None
        return Recipe(**result.data[0])

    def create(self, data: dict[str, Any]) -> Recipe:
        return Recipe(**self._insert(data))
