"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the constraint-error translation every table
shares.
"""

from enum import Enum
from typing import Any, Optional, TypeVar, Generic
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import ConflictError


T = TypeVar("T")

# Postgres SQLSTATE codes surfaced by PostgREST
UNIQUE_VIOLATION = "23505"
NOT_NULL_VIOLATION = "23502"
CHECK_VIOLATION = "23514"


class ConflictReason(str, Enum):
    """Why a write was refused by the database."""

    VALIDATION = "validation"  # a column rule failed, message is meaningful
    DUPLICATE_KEY = "duplicate_key"  # unique index hit, no useful message


class DuplicateRecordError(ConflictError):
    """
    Raised by repositories when a write violates a table constraint.

    ``reason`` tells callers whether ``detail`` carries a human-readable
    validation message or whether they should fall back to their own text.
    """

    def __init__(
        self,
        table: str,
        reason: ConflictReason,
        detail: Optional[str] = None,
    ):
        super().__init__(
            detail or f"Duplicate record in {table}",
            code="DUPLICATE_RECORD",
            details={"table": table, "reason": reason.value},
        )
        self.table = table
        self.reason = reason
        self.detail = detail

    def message_or(self, fallback: str) -> str:
        """The validation message when there is one, otherwise ``fallback``."""
        if self.reason is ConflictReason.VALIDATION and self.detail:
            return self.detail
        return fallback


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - Insert with constraint errors mapped to DuplicateRecordError

    Subclasses set ``table`` and handle dict-to-Pydantic model mapping.

    Example:
        class IngredientRepository(BaseRepository[Ingredient]):
            table = "ingredients"

            def get_by_id(self, ingredient_id: str) -> Optional[Ingredient]:
                result = self._db.table(self.table).select("*").eq("id", ingredient_id).execute()
                if not result.data:
                    return None
                return Ingredient(**result.data[0])
    """

    table: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _insert(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a row and return it as stored.

        Raises:
            DuplicateRecordError: If the row violates a unique or column constraint.
        """
        try:
            result = self._db.table(self.table).insert(data).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateRecordError(self.table, ConflictReason.DUPLICATE_KEY) from e
            if e.code in (NOT_NULL_VIOLATION, CHECK_VIOLATION):
                raise DuplicateRecordError(
                    self.table, ConflictReason.VALIDATION, e.message
                ) from e
            raise
        return result.data[0]

    @staticmethod
    def _page_range(page: int, limit: int) -> tuple[int, int]:
        """Inclusive row range for a 1-indexed page."""
        start = (page - 1) * limit
        return start, start + limit - 1
