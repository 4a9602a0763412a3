"""Centralized configuration for the IMDb chart scraper.

All configuration values are sourced from environment variables
(.env file) and have safe defaults. Command line flags override
them for a single run.

Usage:
    from imdbchart.settings import settings

    settings.imdb.timeout
    settings.logging.level
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from imdbchart.settings.base import LoggingSettings
from imdbchart.settings.sources import IMDBSettings

__all__ = [
    "Settings",
    "settings",
    "LoggingSettings",
    "IMDBSettings",
    "get_settings_summary",
]


# =============================================================================
# GLOBAL SETTINGS
# =============================================================================


class Settings(BaseSettings):
    """Global application settings.

    Aggregates all configuration sections into a single object.
    Access via the singleton: `from imdbchart.settings import settings`
    """

    environment: str = Field(default="development", alias="ENVIRONMENT")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    imdb: IMDBSettings = Field(default_factory=IMDBSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "production", "test"}
        v_lower = v.lower()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid ENVIRONMENT. Valid: {valid_envs}")
        return v_lower


# =============================================================================
# SINGLETON INSTANCE
# =============================================================================

settings = Settings()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_settings_summary() -> dict[str, Any]:
    """Return a flat view of the settings used by a scrape run.

    Returns:
        Configuration dictionary safe for logging.
    """
    return {
        "environment": settings.environment,
        "log_level": settings.logging.level,
        "chart_url": settings.imdb.chart_url,
        "timeout": settings.imdb.timeout,
        "max_concurrency": settings.imdb.max_concurrency,
    }
