"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Each deployment (intake kiosk, review dashboard, CI) sets its own
.env file.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Safe defaults: the memory backend needs no environment at all

Usage:
    from src.core.config import settings

    # Access config
    key = settings.storage_key
    reviewer = settings.reviewer_name

    # Environment detection
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache
from typing import Self

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment

STORAGE_BACKENDS = ("memory", "redis")


class Settings(BaseSettings):
    """
    Review engine settings (flat structure).

    Loads configuration from environment variables.

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Engine configuration loaded from environment.
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

    # Persisted store
    storage_backend: str = Field(
        default="memory",
        description="Key-value backend holding the snapshot (memory, redis)",
    )
    redis_url: str | None = Field(
        default=None,
        description="Redis connection URL (e.g., redis://host:port/db). Required for the redis backend.",
    )
    storage_key: str = Field(
        default="faculty_review_apps_v1",
        description="Key under which the application snapshot is stored",
    )

    # Actors recorded on audit events
    reviewer_name: str = Field(
        default="Faculty Reviewer",
        description="Actor recorded on status changes made through a review session",
    )
    submitter_name: str = Field(
        default="Student",
        description="Actor recorded on the Submitted event of new applications",
    )
    seed_actor: str = Field(
        default="System",
        description="Actor recorded on the Submitted event of the default seed records",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("storage_backend")
    @classmethod
    def validate_storage_backend(cls, v: str) -> str:
        """
        Normalize and check the storage backend name.

        Args:
            v: Backend name.

        Returns:
            str: Lower-cased backend name.

        Raises:
            ValueError: If backend is not one of STORAGE_BACKENDS.
        """
        backend = v.strip().lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"storage_backend must be one of {', '.join(STORAGE_BACKENDS)}, got '{v}'"
            )
        return backend

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Upper-case the log level name.

        Args:
            v: Level name.

        Returns:
            str: Upper-cased level name.
        """
        return v.strip().upper()

    @model_validator(mode="after")
    def require_redis_url(self) -> Self:
        """Redis backend cannot start without a connection URL."""
        if self.storage_backend == "redis" and not self.redis_url:
            raise ValueError("redis_url is required when storage_backend is 'redis'")
        return self

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
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """Check if running in CI environment."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
