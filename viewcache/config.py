"""Configuration management for viewcache."""

from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from viewcache.core.constants import APIConstants


class Settings(BaseSettings):
    """Application configuration."""

    base_url: str | None = Field(default=None, alias="VIEWCACHE_BASE_URL", description="Base URL of the record API")
    api_token: SecretStr | None = Field(
        default=None, alias="VIEWCACHE_API_TOKEN", description="Bearer token sent to the record API"
    )
    cache_dir: Path = Field(
        default_factory=lambda: Path.home() / ".viewcache" / "cache",
        alias="VIEWCACHE_CACHE_DIR",
        description="Directory holding persisted viewports",
    )
    request_timeout: float = Field(
        default=float(APIConstants.REQUEST_TIMEOUT),
        alias="VIEWCACHE_REQUEST_TIMEOUT",
        description="HTTP request timeout in seconds",
    )
    page_size: int = Field(
        default=APIConstants.DEFAULT_PAGE_SIZE,
        alias="VIEWCACHE_PAGE_SIZE",
        description="Default number of records per page",
        gt=0,
    )
    log_level: str = Field(default="WARNING", alias="VIEWCACHE_LOG_LEVEL", description="Logging level")

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )


def load_settings() -> Settings:
    """Load configuration from environment and .env file."""
    return Settings()
