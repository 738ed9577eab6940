"""
Centralized configuration for the Platewise backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., SUPABASE_*, TOKEN_*).
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
    app_name: str = "Platewise API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # Direct Postgres URL, only used by run_migrations.py

    # Session tokens
    jwt_secret: str = ""
    token_ttl_days: int = 7
    extended_token_ttl_days: int = 30
    token_rotation_window_minutes: int = 2880
    activity_throttle_minutes: int = 60

    # Preferences and meal history
    preference_list_cap: int = 100
    meal_history_limit: int = 100
    recent_meal_count: int = 10

    # Pantry inventory
    expiring_soon_days: int = 3

    # Suggestion model
    google_api_key: str = ""
    suggestion_model: str = "gemini-2.5-flash"
    suggestion_temperature: float = 0.7


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
