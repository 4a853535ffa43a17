"""
Centralized Configuration for the Visitor Log

All configuration is loaded from environment variables with sensible defaults.
Uses Pydantic Settings for validation and type coercion.

Usage:
    from visitor_log.core.config import settings

    print(settings.database.host)
    print(settings.database.pool_max_conn)
"""

from typing import Optional
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# SETTINGS CLASSES
# =============================================================================

class DatabaseSettings(BaseSettings):
    """Database configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    database_url: Optional[str] = Field(
        default=None,
        alias="DATABASE_URL",
        description="Full database connection URL"
    )
    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    name: str = Field(default="visitors_db", description="Database name")
    user: str = Field(default="postgres", description="Database user")
    password: str = Field(default="", description="Database password")

    # Connection pool
    pool_min_conn: int = Field(default=1, ge=1, description="Min pool connections")
    pool_max_conn: int = Field(default=10, ge=1, description="Max pool connections")

    @field_validator("database_url", mode="before")
    @classmethod
    def empty_url_to_none(cls, v):
        """Treat an empty DATABASE_URL as unset."""
        return v or None

    @property
    def connect_kwargs(self) -> dict:
        """Keyword arguments for psycopg2.connect / SimpleConnectionPool."""
        if self.database_url:
            return {"dsn": self.database_url}
        return {
            "host": self.host,
            "port": self.port,
            "database": self.name,
            "user": self.user,
            "password": self.password,
        }


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file path"
    )


class Settings(BaseSettings):
    """
    Main settings class that combines all configuration sections.

    Usage:
        from visitor_log.core.config import settings

        print(settings.database.name)
        print(settings.logging.log_level)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


settings = get_settings()


# =============================================================================
# ENVIRONMENT VARIABLE REFERENCE
# =============================================================================
"""
Environment Variables Reference:

Database Settings:
    DATABASE_URL        - Full connection URL (overrides individual settings)
    DB_HOST             - Database host (default: localhost)
    DB_PORT             - Database port (default: 5432)
    DB_NAME             - Database name (default: visitors_db)
    DB_USER             - Database user (default: postgres)
    DB_PASSWORD         - Database password (default: "")
    DB_POOL_MIN_CONN    - Min pool connections (default: 1)
    DB_POOL_MAX_CONN    - Max pool connections (default: 10)

Logging Settings:
    LOG_LEVEL           - Log level (default: INFO)
    LOG_FILE            - Optional log file path
"""


__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "DatabaseSettings",
    "LoggingSettings",
]
