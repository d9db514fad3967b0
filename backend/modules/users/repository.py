"""
User repository for database access.

Encapsulates all Supabase queries against the ``users`` table. The table
carries a unique index on ``email``; violations come back as
DuplicateRecordError from BaseRepository._insert.
"""

from typing import Any, Optional

from shared.models import SearchQuery
from shared.repository import BaseRepository

from .models import User


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Note: This repository does NOT perform authorization checks.
    The service layer decides who may read what.
    """

    table = "users"

    def find_by_id(self, user_id: str) -> Optional[User]:
        result = self._db.table(self.table).select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return User(**result.data[0])

    def find_by_email(self, email: str) -> Optional[User]:
        result = self._db.table(self.table).select("*").eq("email", email).execute()
        if not result.data:
            return None
        return User(**result.data[0])

    def find_by_ids(self, user_ids: list[str]) -> list[User]:
        if not user_ids:
            return []
        result = self._db.table(self.table).select("*").in_("id", user_ids).execute()
        return [User(**row) for row in result.data]

    def create(self, data: dict[str, Any]) -> User:
        return User(**self._insert(data))

    def find(self, query: SearchQuery) -> tuple[int, list[User]]:
        builder = self._db.table(self.table).select("*", count="exact")
        if query.name:
            builder = builder.ilike("display", f"%{query.name}%")

        start, end = self._page_range(query.page, query.limit)
        result = builder.order("created_at", desc=True).range(start, end).execute()
        return result.count or 0, [User(**row) for row in result.data]
