"""
Centralized configuration for the CodeDetails backend.

All settings are loaded from environment variables with sensible defaults.
Integration-specific settings are namespaced (e.g., SUPABASE_*, CLERK_*).
"""

from functools import lru_cache
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
    app_name: str = "CodeDetails API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # Direct Postgres URL, used by run_migrations.py

    # Clerk
    clerk_secret_key: str = ""
    clerk_api_url: str = "https://api.clerk.com/v1"
    clerk_jwt_key: str = ""  # PEM public key (RS256) or shared secret (HS256)
    clerk_jwt_algorithms: list[str] = ["RS256"]
    clerk_webhook_signing_secret: str = ""

    # Admin dashboard
    admin_dashboard_moderator: str = ""

    # Presentation
    default_locale: str = "en_US"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
