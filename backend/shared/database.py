"""
Database client factory for Supabase.

Provides the service-role client used by every repository. The backend
enforces ownership itself, so Row Level Security is bypassed.
"""

import logging
from typing import Optional
from supabase import ClientOptions, create_client, Client

from .config import get_settings

logger = logging.getLogger(__name__)

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Returns:
        Supabase client configured with service role key and the DB_NAME schema
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_SERVICE_ROLE_KEY (and SUPABASE_URL or DB_HOST/DB_PORT)."
            )
        _service_client = create_client(
            settings.database_url,
            settings.supabase_service_role_key,
            options=ClientOptions(schema=settings.db_name),
        )

    return _service_client


def check_connection() -> None:
    """
    Issue a trivial query to make sure the database is reachable.

    Raises whatever the client raises; callers decide whether that is fatal.
    """
    client = get_supabase_client()
    client.table("users").select("id").limit(1).execute()
    logger.info("Connected to database at %s", get_settings().database_url)


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
