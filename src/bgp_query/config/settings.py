"""Centralized settings management using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bgp_query import __version__

DEFAULT_BASE_URL = "https://bgp.he.net"


class BGPSettings(BaseSettings):
    """Upstream site and HTTP configuration."""

    model_config = SettingsConfigDict(env_prefix="BGP_", env_file=".env", extra="ignore")

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Base URL of the BGP toolkit")
    timeout: float | None = Field(default=None, description="Request timeout in seconds (None waits forever)")
    user_agent: str = Field(default=f"bgp-query/{__version__}", description="User-Agent header")
    parser: str = Field(default="lxml", description="BeautifulSoup tree builder")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("base_url must not be empty")
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_", env_file=".env", extra="ignore")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level",
    )
    format: Literal["json", "console"] = Field(default="console", description="Log format")


class Settings(BaseSettings):
    """Main settings class aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    bgp: BGPSettings = Field(default_factory=BGPSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
