"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: SQLAlchemy URL of the relational store.
        database_echo: Log every SQL statement emitted by the engine.
        create_tables_on_startup: Create missing tables when the app starts.
        auth_secret: Shared secret used to verify session tokens.
        auth_algorithm: JWT signing algorithm.
        auth_audience: Expected ``aud`` claim, if tokens carry one.
        rate_limit_enabled: Enforce the per-client rate limit.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Backlog"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite:///./backlog.db"
    database_echo: bool = False
    create_tables_on_startup: bool = True

    auth_secret: str = "change-me"
    auth_algorithm: str = "HS256"
    auth_audience: Optional[str] = None

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    @property
    def is_sqlite(self) -> bool:
        """Return True when the configured store is SQLite."""
        return self.database_url.startswith("sqlite")


settings = Settings()
