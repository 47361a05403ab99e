"""Common services package."""

from common.services import user_mapper
from common.services.user_service import SqliteUserService, UserService

__all__ = [
    "SqliteUserService",
    "UserService",
    "user_mapper",
]
