"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management for the catalog service using Pydantic Settings.

A single global Settings instance is shared through get_settings().

Features:
---------
- Environment variable loading with type validation
- .env file support for local development
- Computed properties for derived values

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

Database Notes:
--------------
- DATABASE_URL accepts any SQLAlchemy URL (sqlite, postgresql, ...)
- DB_ECHO=true logs every emitted SQL statement

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        log_level: Root log level when debug is off
        host: Server bind address
        port: Server port number
        database_url: SQLAlchemy database connection string
        db_echo: Log emitted SQL statements
        api_prefix: Path prefix for the REST routes
        cors_origins: Allowed CORS origins (JSON array string)

    Example:
        >>> settings = Settings()
        >>> print(settings.app_name)
        'Catalog API'
        >>> print(settings.is_production)
        False
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Catalog API",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level when debug mode is off"
    )

    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="0.0.0.0",
        description="Server bind address"
    )

    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Server port number"
    )

    api_prefix: str = Field(
        default="",
        description="Path prefix for REST routes, e.g. /api/v1"
    )

    # =========================================================================
    # DATABASE SETTINGS
    # =========================================================================
    database_url: str = Field(
        default="sqlite:///./storage/db/catalog.db",
        description="SQLAlchemy database connection string"
    )

    db_echo: bool = Field(
        default=False,
        description="Log every SQL statement emitted by the engine"
    )

    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as JSON array string"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.

        Unknown values fall back to 'development' with a warning.
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level is one the logging module knows."""
        supported = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

        if value.upper() not in supported:
            raise ValueError(
                f"Unsupported log level: {value}. "
                f"Supported: {', '.join(sorted(supported))}"
            )

        return value.upper()

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, value: str) -> str:
        """Strip trailing slashes and force a leading slash on non-empty prefixes."""
        value = value.strip().rstrip("/")
        if value and not value.startswith("/"):
            value = f"/{value}"
        return value

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def effective_log_level(self) -> int:
        """Numeric log level, DEBUG whenever debug mode is on."""
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level)

    @property
    def cors_origins_list(self) -> List[str]:
        """
        Parse CORS origins from JSON string to list.

        Returns:
            List of allowed origin strings
        """
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
            return ["*"]
        except json.JSONDecodeError:
            logger.warning(
                f"Invalid CORS origins JSON: {self.cors_origins}, "
                "defaulting to ['*']"
            )
            return ["*"]

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================
    def get_database_path(self) -> Optional[Path]:
        """
        Extract database file path for SQLite databases.

        Returns:
            Path to database file, or None for non-SQLite or in-memory databases
        """
        if not self.database_url.startswith("sqlite"):
            return None

        db_path = self.database_url.split(":///", 1)[-1]
        if db_path in ("", "sqlite://", ":memory:"):
            return None
        if db_path.startswith("./"):
            db_path = db_path[2:]
        return Path(db_path)

    def ensure_directories(self) -> None:
        """Create the database directory for file-based SQLite databases."""
        db_path = self.get_database_path()
        if db_path:
            db_path.parent.mkdir(parents=True, exist_ok=True)

        logger.debug("Required directories created/verified")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Uses lru_cache to ensure only one Settings instance is created
    throughout the application lifecycle.

    Returns:
        Global Settings instance
    """
    settings = Settings()

    settings.ensure_directories()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
