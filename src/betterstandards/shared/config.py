"""Library configuration.

Uses pydantic-settings for environment variable support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings with environment variable support.

    All settings can be overridden via environment variables prefixed with
    ``BETTERSTANDARDS_``.
    Example: BETTERSTANDARDS_LOG_LEVEL, BETTERSTANDARDS_LOG_CAPTURED_FAILURES
    """

    model_config = SettingsConfigDict(
        env_prefix="BETTERSTANDARDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # General
    # =========================================================================
    debug: bool = Field(default=False, description="Debug mode")

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional log file path",
    )
    configure_logging: bool = Field(
        default=False,
        description="Install log handlers on first get_logger() call",
    )

    # =========================================================================
    # Result capture
    # =========================================================================
    log_captured_failures: bool = Field(
        default=False,
        description="Log every exception captured by Result.of()",
    )

    # =========================================================================
    # Validators
    # =========================================================================
    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("log_file", mode="before")
    @classmethod
    def empty_log_file_is_none(cls, v: object) -> object:
        """Treat an empty log file path as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
