"""FastAPI application settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support.

    List values are read as JSON, e.g.
    ``ORDERBROWSER_CORS_ORIGINS='["http://localhost:5173"]'``.
    """

    model_config = SettingsConfigDict(env_prefix="ORDERBROWSER_")

    # App info
    app_name: str = "Order Browser API"
    version: str = "1.0.0"
    debug: bool = False

    # Default development origins
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Pagination
    default_page_size: int = 10
    max_page_size: int = 100


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
