"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from infogenius.configs.base import BaseSettings
from infogenius.configs.gemini import GeminiSettings
from infogenius.configs.local_store import LocalStoreSettings
from infogenius.configs.storage import GCSSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    gcs: GCSSettings = Field(default_factory=GCSSettings)
    local_store: LocalStoreSettings = Field(default_factory=LocalStoreSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from infogenius.configs import get_settings
        settings = get_settings()
    """
    return Settings()
