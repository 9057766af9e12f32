"""
Service configuration for the property analyzer.

Values come from PROPERTY_ANALYZER_* environment variables, falling back
to the env file picked by APP_ENV.
"""

import os
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_env_file() -> str:
    """Pick the env file for the current APP_ENV."""
    if os.getenv("APP_ENV", "development") == "production":
        return ".env.production"
    return ".env.development"


class Settings(BaseSettings):
    """Analyzer service settings."""

    model_config = SettingsConfigDict(
        env_prefix="PROPERTY_ANALYZER_",
        env_file=get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Property Analyzer"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # HTTP
    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = 8000


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
