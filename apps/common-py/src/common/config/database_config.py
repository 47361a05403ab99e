"""Configuration management for the local SQLite store."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Defaults to .env in the common-py project directory (apps/common-py/.env).

    Returns:
        Path to the .env file
    """
    # This file is in apps/common-py/src/common/config/database_config.py
    # So we go up 4 levels to get to apps/common-py/
    current_file = Path(__file__)
    common_py_dir = current_file.parent.parent.parent.parent
    default_env_file = common_py_dir / ".env"
    return str(default_env_file)


class DatabaseConfig(BaseSettings):
    """Settings for the SQLite database from environment variables."""

    database_path: str = "users.db"
    database_echo: bool = False

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        env_prefix="",
        extra="ignore",
    )


def get_database_config() -> DatabaseConfig:
    """Get database configuration.

    Returns:
        DatabaseConfig instance
    """
    return DatabaseConfig()
