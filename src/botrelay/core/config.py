"""
Configuration management using Pydantic Settings.

Configuration is read from environment variables (and an optional ``.env``
file). Variable names match the ones the relay has always used, so an
existing ``.env`` with ``API_TOKEN`` and ``ALLOWED_CATEGORIES`` keeps
working.

Usage:
    from botrelay.core.config import get_settings

    settings = get_settings()
    if settings.api_token is None:
        ...
"""

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from botrelay.core.constants import (
    MAX_RETRIES_DEFAULT,
    PUBLIC_BOT_PREFIX_DEFAULT,
    RETRY_AFTER_DEFAULT_SECONDS,
    RETRY_AFTER_MAX_SECONDS,
    UPSTREAM_BASE_URL_DEFAULT,
    UPSTREAM_TIMEOUT_DEFAULT,
)
from botrelay.core.enums import AuthScheme, Environment


class Settings(BaseSettings):
    """
    Relay settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. ``.env`` file in the working directory
        3. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Server bind host",
    )
    port: int = Field(
        default=3000,
        description="Server bind port",
    )
    reload: bool = Field(
        default=False,
        description="Enable auto-reload on code changes (development only)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Bot Relay",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Upstream configuration
    upstream_api_base_url: str = Field(
        default=UPSTREAM_BASE_URL_DEFAULT,
        description="FNLB API base URL",
    )
    api_token: str | None = Field(
        default=None,
        description="FNLB API key. Handlers fail fast when it is not set.",
    )
    upstream_auth_scheme: AuthScheme = Field(
        default=AuthScheme.RAW,
        description="Authorization header scheme: 'raw' sends the key as-is, "
        "'bearer' prefixes it with 'Bearer '",
    )
    upstream_timeout: float = Field(
        default=UPSTREAM_TIMEOUT_DEFAULT,
        description="Upstream request timeout in seconds",
    )
    upstream_max_retries: int = Field(
        default=MAX_RETRIES_DEFAULT,
        description="Total attempts per upstream call while rate limited",
    )
    upstream_retry_after_default: float = Field(
        default=RETRY_AFTER_DEFAULT_SECONDS,
        description="Seconds to wait after a 429 without a usable Retry-After",
    )
    upstream_retry_after_max: float = Field(
        default=RETRY_AFTER_MAX_SECONDS,
        description="Longest wait honored for a single 429, whatever Retry-After says",
    )

    # Business rules
    allowed_categories: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(),
        description="Category ids exposed by /api/categories (comma-separated)",
    )
    public_bot_prefix: str = Field(
        default=PUBLIC_BOT_PREFIX_DEFAULT,
        description="Nickname prefix (case-insensitive) of public pool bots",
    )

    # Presentation
    static_dir: Path | None = Field(
        default=None,
        description="Directory holding index.html for the browser client",
    )
    cors_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(),
        description="Allowed CORS origins (comma-separated). Empty disables CORS.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("upstream_api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("api_token")
    @classmethod
    def blank_token_is_unset(cls, v: str | None) -> str | None:
        """Treat an empty API_TOKEN the same as a missing one."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("allowed_categories", "cors_origins", mode="before")
    @classmethod
    def parse_comma_separated(cls, v: object) -> tuple[str, ...]:
        """
        Parse a comma-separated string into a tuple of non-empty items.

        Args:
            v: Raw value (string from env, or an already-split sequence).

        Returns:
            tuple[str, ...]: Stripped, non-empty items in original order.
        """
        if v is None:
            return ()
        if isinstance(v, str):
            items = v.split(",")
        else:
            items = list(v)  # type: ignore[call-overload]
        return tuple(item.strip() for item in items if item and item.strip())

    @field_validator("upstream_max_retries")
    @classmethod
    def validate_max_retries(cls, v: int) -> int:
        """
        Validate the retry budget is a small positive bound.

        Raises:
            ValueError: If not between 1 and 10.
        """
        if not 1 <= v <= 10:
            raise ValueError("upstream_max_retries must be between 1 and 10")
        return v

    @field_validator("upstream_retry_after_default")
    @classmethod
    def validate_retry_after_default(cls, v: float) -> float:
        """Reject negative default waits."""
        if v < 0:
            raise ValueError("upstream_retry_after_default must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_retry_after_bounds(self) -> "Settings":
        """Require the wait ceiling to cover the default wait."""
        if self.upstream_retry_after_max < self.upstream_retry_after_default:
            raise ValueError(
                "upstream_retry_after_max must be >= upstream_retry_after_default"
            )
        return self

    @property
    def allowed_category_set(self) -> frozenset[str]:
        """Allowed-Category Set used as a read-only filter predicate."""
        return frozenset(self.allowed_categories)

    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once per process; the Allowed-Category Set and the
    retry policy are therefore fixed for the process lifetime.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
