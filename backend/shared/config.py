"""
Centralized configuration for the Recipe Share backend.

All settings are loaded from environment variables with sensible defaults.
Database settings keep the DB_* names used by existing deployments.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Recipe Share API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    reload: bool = False

    # TLS (SSL=1 switches the runner to https)
    ssl: bool = False
    cert_location: Optional[str] = None
    cert_key_location: Optional[str] = None

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Database
    db_host: str = "localhost"
    db_port: int = 54321
    db_name: str = "public"  # Postgres schema exposed through PostgREST
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Credentials
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_ttl_minutes: int = 60
    token_cookie_name: str = "token"

    # Google sign-in
    google_client_id: str = ""

    @property
    def database_url(self) -> str:
        """Supabase REST endpoint, falling back to DB_HOST/DB_PORT."""
        if self.supabase_url:
            return self.supabase_url
        return f"http://{self.db_host}:{self.db_port}"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
