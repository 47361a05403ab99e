"""Outcome types returned by storage services."""

from dataclasses import dataclass
from enum import Enum


class OperationStatus(str, Enum):
    """Outcome of a storage operation."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    STORAGE_ERROR = "storage_error"


@dataclass(frozen=True)
class OperationResult[T]:
    """Status of a storage operation plus its payload on success."""

    status: OperationStatus
    value: T | None = None

    @property
    def ok(self) -> bool:
        """Whether the operation succeeded."""
        return self.status is OperationStatus.SUCCESS

    @classmethod
    def success(cls, value: T) -> "OperationResult[T]":
        """Successful result carrying a payload."""
        return cls(OperationStatus.SUCCESS, value)

    @classmethod
    def not_found(cls) -> "OperationResult[T]":
        """The referenced row does not exist."""
        return cls(OperationStatus.NOT_FOUND)

    @classmethod
    def conflict(cls) -> "OperationResult[T]":
        """Another row already holds the same name and lastname."""
        return cls(OperationStatus.CONFLICT)

    @classmethod
    def storage_error(cls) -> "OperationResult[T]":
        """The storage layer failed."""
        return cls(OperationStatus.STORAGE_ERROR)
