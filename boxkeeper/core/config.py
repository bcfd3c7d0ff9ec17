"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from
environment variables (optionally a ``.env`` file).

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from boxkeeper.core.config import get_settings

    settings = get_settings()
    if settings.is_testing:
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from boxkeeper.core.enums import Environment

SUPPORTED_EVENT_BUS_TYPES = frozenset({"in-memory"})
SUPPORTED_REPOSITORY_TYPES = frozenset({"in-memory", "sql"})


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. ``.env`` file in the working directory
        3. Default values

    Returns:
        Settings: Application configuration loaded from environment.
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

    # Application metadata
    app_name: str = Field(
        default="Boxkeeper",
        description="Application name",
    )

    # Identifier generation
    id_max_attempts: int = Field(
        default=100,
        description="Maximum candidates drawn before identifier generation gives up",
    )

    # Adapter selection
    event_bus_type: str = Field(
        default="in-memory",
        description="Event transport adapter (in-memory)",
    )
    repository_type: str = Field(
        default="in-memory",
        description="Box repository adapter (in-memory, sql)",
    )

    # Database configuration (repository_type=sql)
    database_url: str = Field(
        default="sqlite:///:memory:",
        description="SQLAlchemy database URL (e.g., sqlite:///boxes.db)",
    )
    db_echo: bool = Field(
        default=False,
        description="Log all SQL statements",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("id_max_attempts")
    @classmethod
    def validate_id_max_attempts(cls, v: int) -> int:
        """
        Validate the identifier retry limit.

        Args:
            v: Maximum number of candidates.

        Returns:
            int: Validated limit.

        Raises:
            ValueError: If limit is lower than 1.
        """
        if v < 1:
            raise ValueError("id_max_attempts must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Upper-case level name.

        Raises:
            ValueError: If level is not a standard logging level.
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log_level: {v}")
        return level

    @field_validator("event_bus_type")
    @classmethod
    def validate_event_bus_type(cls, v: str) -> str:
        """Validate the event transport adapter name."""
        if v not in SUPPORTED_EVENT_BUS_TYPES:
            raise ValueError(
                f"Unsupported event_bus_type: {v}. "
                f"Supported: {', '.join(sorted(SUPPORTED_EVENT_BUS_TYPES))}"
            )
        return v

    @field_validator("repository_type")
    @classmethod
    def validate_repository_type(cls, v: str) -> str:
        """Validate the repository adapter name."""
        if v not in SUPPORTED_REPOSITORY_TYPES:
            raise ValueError(
                f"Unsupported repository_type: {v}. "
                f"Supported: {', '.join(sorted(SUPPORTED_REPOSITORY_TYPES))}"
            )
        return v

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
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION

    @property
    def use_json_logs(self) -> bool:
        """JSON log output for machine consumers (testing and CI)."""
        return self.environment in {Environment.TESTING, Environment.CI}


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
