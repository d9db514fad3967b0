"""
Recipes module data models.

Recipes and ingredients as stored, the request bodies that create them,
and the search responses that pair each record with its author.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from modules.users.models import Author


class Ingredient(BaseModel):
    """An ingredient row from the ``ingredients`` table."""

    id: str = Field(..., description="Ingredient ID (UUID)")
    author: str = Field(..., description="ID of the user who created it")
    name: str = Field(..., description="Ingredient name")
    image: str = Field(default="", description="Image URL")
    created_at: Optional[datetime] = Field(None, description="Creation time")

    model_config = {"extra": "ignore"}


class IngredientListItem(BaseModel):
    """Ingredient in search results, with the author resolved."""

    id: str
    name: str
    author: Optional[Author] = None
    created_at: Optional[datetime] = None


class CreateIngredientRequest(BaseModel):
    """Request body for creating an ingredient."""

    name: Optional[str] = Field(None, description="Ingredient name (required)")
    image: Optional[str] = Field(None, description="Image URL")


class Recipe(BaseModel):
    """A recipe row from the ``recipes`` table."""

    id: str = Field(..., description="Recipe ID (UUID)")
    author: str = Field(..., description="ID of the user who created it")
    name: str
    ingredients: list[str] = Field(default_factory=list, description="Ingredient IDs")
    directions: str
    tags: list[str] = Field(default_factory=list)
    image: str
    num_favorites: int = Field(default=0, ge=0)
    num_hits: int = Field(default=0, ge=0)
    rating: float = Field(default=0, ge=0, le=5)
    difficulty: Optional[int] = Field(None, ge=0, le=10)
    date_created: Optional[datetime] = None

    model_config = {"extra": "ignore"}


class RecipeListItem(BaseModel):
    """Recipe in search results, with the author resolved."""

    id: str
    name: str
    author: Optional[Author] = None
    ingredients: list[str] = Field(default_factory=list)
    directions: str
    tags: list[str] = Field(default_factory=list)
    image: str
    num_favorites: int = 0
    num_hits: int = 0
    rating: float = 0
    difficulty: Optional[int] = None
    date_created: Optional[datetime] = None


class CreateRecipeRequest(BaseModel):
    """Request body for creating a recipe."""

    name: str = Field(..., min_length=1, description="Recipe name is required")
    ingredients: list[str] = Field(default_factory=list, description="Ingredient IDs")
    directions: str = Field(..., min_length=1, description="Recipes require directions")
    tags: list[str] = Field(default_factory=list)
    image: str = Field(
        ..., min_length=1, description="Recipes require some image to display the end result"
    )
    difficulty: Optional[int] = Field(None, ge=0, le=10)


class IngredientSearchResponse(BaseModel):
    """Page of ingredient search results."""

    model_config = ConfigDict(populate_by_name=True)

    total_records: int = Field(..., serialization_alias="totalRecords")
    filtered_records: int = Field(..., serialization_alias="filteredRecords")
    ingredients: list[IngredientListItem]


class RecipeSearchResponse(BaseModel):
    """Page of recipe search results."""

    model_config = ConfigDict(populate_by_name=True)

    total_records: int = Field(..., serialization_alias="totalRecords")
    filtered_records: int = Field(..., serialization_alias="filteredRecords")
    recipes: list[RecipeListItem]
