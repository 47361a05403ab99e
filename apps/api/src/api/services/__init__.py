"""Service initialization and dependency injection."""

import logging

from api.config import Settings, get_settings
from common.config.database_config import DatabaseConfig
from common.services.user_service import SqliteUserService, UserService
from fastapi import Depends

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache: dict[str, UserService] = {}


def get_user_service(settings: Settings = Depends(get_settings)) -> UserService:
    """Get SQLite user service instance.

    Args:
        settings: Application settings

    Returns:
        SqliteUserService instance
    """
    if "user_service" not in _services_cache:
        _services_cache["user_service"] = SqliteUserService(
            config=DatabaseConfig(
                database_path=settings.database_path,
                database_echo=settings.database_echo,
                _env_file=None,
            ),
        )
        logger.info("Initialized SqliteUserService")

    return _services_cache["user_service"]


def close_services() -> None:
    """Release resources held by cached services."""
    for name, service in list(_services_cache.items()):
        service.close()
        logger.info("Closed %s", name)
    _services_cache.clear()
