"""IMDb chart scraping configuration settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IMDBSettings(BaseSettings):
    """IMDb scraping configuration.

    Attributes:
        chart_url: Default chart page to harvest.
        timeout: Per-request timeout (seconds).
        max_concurrency: Cap on in-flight detail fetches (None = unbounded).
        user_agent: HTTP User-Agent for requests.
        accept_language: Accept-Language header sent with every request.
    """

    chart_url: str = Field(
        default="https://www.imdb.com/chart/top",
        alias="IMDB_CHART_URL",
    )
    timeout: float = Field(default=30.0, alias="IMDB_TIMEOUT")
    max_concurrency: int | None = Field(default=None, alias="IMDB_MAX_CONCURRENCY")
    user_agent: str = Field(
        default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        alias="IMDB_USER_AGENT",
    )
    accept_language: str = Field(
        default="en-US,en;q=0.9",
        alias="IMDB_ACCEPT_LANGUAGE",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeout is strictly positive."""
        if v <= 0:
            raise ValueError("IMDB_TIMEOUT must be > 0")
        return v

    @field_validator("max_concurrency")
    @classmethod
    def validate_max_concurrency(cls, v: int | None) -> int | None:
        """Validate concurrency cap is positive when set."""
        if v is not None and v < 1:
            raise ValueError("IMDB_MAX_CONCURRENCY must be >= 1")
        return v
