"""
Client configuration using Pydantic settings.

Usage:
    from scorecard.config import get_settings
    settings = get_settings()
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"


class Settings(BaseSettings):
    """
    Settings loaded from environment variables and .env file.

    Required:
        - GITHUB_TOKEN (bearer token for the GraphQL API)
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # GitHub
    github_token: Optional[str] = Field(default=None, validation_alias="GITHUB_TOKEN")
    graphql_url: str = Field(default=GITHUB_GRAPHQL_URL, validation_alias="GITHUB_GRAPHQL_URL")
    page_size: int = Field(default=100, ge=1, le=100, validation_alias="SCORECARD_PAGE_SIZE")
    # None keeps aiohttp's default timeout
    request_timeout: Optional[float] = Field(default=None, gt=0, validation_alias="SCORECARD_REQUEST_TIMEOUT")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    environment: str = Field(default="development", validation_alias="ENV")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def is_development(self) -> bool:
        return self.debug or self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
