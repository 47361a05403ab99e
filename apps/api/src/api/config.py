"""Configuration management for the Users API."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the API project directory (apps/api/.env).

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # This file is in apps/api/src/api/config.py
    # So we go up 3 levels to get to apps/api/
    current_file = Path(__file__)
    api_dir = current_file.parent.parent.parent
    default_env_file = api_dir / ".env"
    return str(default_env_file)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "users-api"
    app_version: str = "0.1.0"
    environment: str = "development"
    log_level: str = "info"

    # API
    api_host: str = "localhost"
    api_port: int = 8000
    https_redirect: bool = False

    # SQLite
    database_path: str = "users.db"
    database_echo: bool = False

    # UI
    ui_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def docs_enabled(self) -> bool:
        """Whether the interactive API documentation is served."""
        return self.environment.lower() in {"development", "dev", "local"}


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
