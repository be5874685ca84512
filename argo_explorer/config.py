"""
Argo Explorer Application Configuration

Uses pydantic-settings to load configuration from environment variables and .env file.
All settings are validated on application startup.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Data Store
    # =========================================================================
    SEED_SAMPLE_DATA: bool = True  # Load the Indian Ocean sample floats on startup

    # =========================================================================
    # Chat Query History
    # =========================================================================
    CHAT_HISTORY_DEFAULT_LIMIT: int = 50
    CHAT_HISTORY_MAX_LIMIT: int = 500

    # =========================================================================
    # HTTP
    # =========================================================================
    SERVICE_NAME: str = "Argo Explorer API"
    CORS_ORIGINS: str = "http://localhost:5000"  # Comma-separated allowed origins

    # =========================================================================
    # Monitoring
    # =========================================================================
    SENTRY_DSN: Optional[str] = None  # Optional - disabled if not set

    # =========================================================================
    # Application
    # =========================================================================
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


# Export singleton instance for convenience
settings = get_settings()
