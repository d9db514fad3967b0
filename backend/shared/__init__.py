"""
Shared infrastructure for Recipe Share backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository and constraint-error translation

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, check_connection, reset_client_cache
from .exceptions import (
    ShareError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
)
from .models import RequestIdentity, SearchQuery
from .repository import BaseRepository, ConflictReason, DuplicateRecordError

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "check_connection",
    "reset_client_cache",
    "ShareError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "ExternalServiceError",
    "RequestIdentity",
    "SearchQuery",
    "BaseRepository",
    "ConflictReason",
    "DuplicateRecordError",
]
