"""Configuration settings for Job-Tracker."""

from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Storage
    database_path: Path = Field(
        default=Path("./data/jobs.db"),
        description="Path to the SQLite jobs database",
    )
    migrations_dir: Path | None = Field(
        default=None,
        description="Directory of *.sql migration scripts (defaults to the bundled ones)",
    )

    # Connection pool
    pool_max_size: Annotated[int, Field(gt=0)] = Field(
        default=5,
        description="Maximum number of pooled database connections",
    )
    pool_max_lifetime_seconds: Annotated[float, Field(gt=0)] = Field(
        default=1800.0,
        description="Connections older than this are closed instead of reused",
    )
    pool_timeout_seconds: Annotated[float, Field(gt=0)] = Field(
        default=30.0,
        description="How long to wait for a free pooled connection",
    )
    query_timeout_seconds: Annotated[float, Field(gt=0)] | None = Field(
        default=None,
        description="Upper bound for a single store operation (unset means no limit)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("migrations_dir", "query_timeout_seconds", mode="before")
    @classmethod
    def empty_as_unset(cls, v: object) -> object:
        """Treat blank environment values as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


# Shared instance, built on first use
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (useful for testing)."""
    global _settings
    _settings = None
