"""
Recipes module exceptions.
"""

from shared.exceptions import NotFoundError, ShareError, ValidationError


class SearchFailedError(ShareError):
    """Raised when a catalog search query cannot be executed."""

    status_code = 422

    def __init__(self, collection: str):
        super().__init__(
            "Failed to execute query",
            code="SEARCH_FAILED",
            details={"collection": collection},
        )


class MissingIngredientNameError(ValidationError):
    """Raised when an ingredient is created without a name."""

    def __init__(self):
        super().__init__("Missing ingredient name in the request", code="INGREDIENT_NAME_MISSING")


class IngredientCreateError(ValidationError):
    """Raised when the database refuses a new ingredient."""

    def __init__(self):
        super().__init__(
            "Failed to create an ingredient with provided properties",
            code="INGREDIENT_CREATE_FAILED",
        )


class RecipeCreateError(ValidationError):
    """Raised when the database refuses a new recipe."""

    def __init__(self, message: str = "Failed to create a recipe with provided properties"):
        super().__init__(message, code="RECIPE_CREATE_FAILED")


class RecipeNotFoundError(NotFoundError):
    """Raised when a recipe is not found."""

    def __init__(self, recipe_id: str):
        super().__init__(
            "No result found",
            code="RECIPE_NOT_FOUND",
            details={"recipe_id": recipe_id},
        )
