"""Common models package."""

from common.models.results import OperationResult, OperationStatus
from common.models.user import User, UserModel

__all__ = [
    "OperationResult",
    "OperationStatus",
    "User",
    "UserModel",
]
