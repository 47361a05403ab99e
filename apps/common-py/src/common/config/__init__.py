"""Configuration package."""

from common.config.database_config import DatabaseConfig, get_database_config

__all__ = ["DatabaseConfig", "get_database_config"]
