"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables (and an optional ``.env`` file).

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Settings are read by the container and handed to components at
  construction time; components never read settings on their own

Usage:
    from ticketstore.core.config import get_settings

    settings = get_settings()
    prefix = settings.ticket_key_prefix
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ticketstore.core.enums import Environment

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Ticket store settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. ``.env`` file in the working directory
        3. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Cache backend
    cache_backend: Literal["redis", "memory"] = Field(
        default="redis",
        description="Cache client implementation (redis, or memory for single-process use)",
    )
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (e.g., redis://host:port/db)",
    )
    redis_password: str | None = Field(
        default=None,
        description="Redis password. Overrides any password embedded in REDIS_URL.",
    )
    redis_max_connections: int = Field(
        default=50,
        description="Maximum connections in the Redis connection pool",
    )
    redis_socket_timeout: float = Field(
        default=5.0,
        description="Redis connect/read timeout in seconds",
    )

    # Ticket namespace
    ticket_key_prefix: str = Field(
        default="ticketstore:session:",
        description="Namespace prefix prepended to every session key",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Level name, any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("redis_max_connections", "redis_socket_timeout")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """
        Reject zero or negative pool sizes and timeouts.

        Args:
            v: Configured value.

        Returns:
            The value unchanged.

        Raises:
            ValueError: If the value is not positive.
        """
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("ticket_key_prefix")
    @classmethod
    def validate_ticket_key_prefix(cls, v: str) -> str:
        """
        Require a non-empty namespace prefix.

        Args:
            v: Prefix string.

        Returns:
            str: The prefix unchanged.

        Raises:
            ValueError: If the prefix is empty or whitespace.
        """
        if not v.strip():
            raise ValueError("ticket_key_prefix must not be empty")
        return v

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for structlog filtering."""
        return logging.getLevelNamesMapping()[self.log_level]

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing or CI environment.

        Returns:
            bool: True if environment is TESTING or CI, False otherwise.
        """
        return self.environment in {Environment.TESTING, Environment.CI}

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded once per process. Call
    ``get_settings.cache_clear()`` after changing the environment in tests.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
