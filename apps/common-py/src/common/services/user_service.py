"""User service with SQLite implementation."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from common.config.database_config import DatabaseConfig
from common.infra.sqlite.entities import UserEntity
from common.infra.sqlite.sqlite_base import BaseSqliteClient
from common.models.results import OperationResult

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value; larger ids cannot match any row
_MIN_ROW_ID = -(2**63)
_MAX_ROW_ID = 2**63 - 1


def _is_storable_id(user_id: int | None) -> bool:
    return user_id is not None and _MIN_ROW_ID <= user_id <= _MAX_ROW_ID


class UserService(ABC):
    """Abstract interface for user service."""

    @abstractmethod
    def list_users(self) -> OperationResult[list[UserEntity]]:
        """List all users."""
        pass

    @abstractmethod
    def get_user_by_id(self, user_id: int) -> OperationResult[UserEntity]:
        """Get a user by ID."""
        pass

    @abstractmethod
    def find_user_by_name(self, name: str, lastname: str, exclude_id: int | None = None) -> UserEntity | None:
        """Find the user holding a name and lastname pair.

        Args:
            name: First name to match exactly
            lastname: Last name to match exactly
            exclude_id: Optional user ID to leave out of the lookup

        Returns:
            The matching user, or None
        """
        pass

    @abstractmethod
    def save_user(self, user: UserEntity) -> OperationResult[UserEntity]:
        """Insert a new user unless the name and lastname are taken."""
        pass

    @abstractmethod
    def update_user(self, user: UserEntity) -> OperationResult[UserEntity]:
        """Overwrite an existing user unless another user holds its name and lastname."""
        pass

    @abstractmethod
    def delete_user(self, user: UserEntity) -> OperationResult[bool]:
        """Delete a user."""
        pass

    @abstractmethod
    def ping(self) -> bool:
        """Check storage availability."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release storage resources."""
        pass


class SqliteUserService(BaseSqliteClient, UserService):
    """SQLite implementation of UserService."""

    def __init__(
        self,
        database_path: str | Path | None = None,
        config: DatabaseConfig | None = None,
        echo: bool | None = None,
    ) -> None:
        """Initialize SQLite user service.

        Args:
            database_path: Path to the database file
            config: Database configuration used for unset arguments
            echo: Log emitted SQL
        """
        super().__init__(database_path=database_path, config=config, echo=echo)
        logger.info("User store ready at %s", self.database_path)

    @staticmethod
    def _find_by_name(session: Session, name: str, lastname: str, exclude_id: int | None = None) -> UserEntity | None:
        query = select(UserEntity).where(UserEntity.name == name, UserEntity.lastname == lastname)
        if exclude_id is not None:
            query = query.where(UserEntity.id != exclude_id)
        return session.scalars(query.limit(1)).first()

    def list_users(self) -> OperationResult[list[UserEntity]]:
        """List all users."""
        try:
            with self.session_scope() as session:
                users = list(session.scalars(select(UserEntity).order_by(UserEntity.id)))
            return OperationResult.success(users)
        except SQLAlchemyError as e:
            logger.error("Error listing users: %s", e, exc_info=True)
            return OperationResult.storage_error()

    def get_user_by_id(self, user_id: int) -> OperationResult[UserEntity]:
        """Get a user by ID."""
        if not _is_storable_id(user_id):
            return OperationResult.not_found()

        try:
            with self.session_scope() as session:
                user = session.get(UserEntity, user_id)
        except SQLAlchemyError as e:
            logger.error("Error getting user %s: %s", user_id, e, exc_info=True)
            return OperationResult.storage_error()

        if user is None:
            return OperationResult.not_found()
        return OperationResult.success(user)

    def find_user_by_name(self, name: str, lastname: str, exclude_id: int | None = None) -> UserEntity | None:
        """Find the user holding a name and lastname pair."""
        with self.session_scope() as session:
            return self._find_by_name(session, name, lastname, exclude_id)

    def save_user(self, user: UserEntity) -> OperationResult[UserEntity]:
        """Insert a new user unless the name and lastname are taken.

        The unique constraint on (name, lastname) backs up the lookup, so a
        concurrent insert of the same pair also ends up as a conflict.
        """
        try:
            with self.session_scope() as session:
                if self._find_by_name(session, user.name, user.lastname) is not None:
                    logger.warning("User %s %s already exists, not inserting", user.name, user.lastname)
                    return OperationResult.conflict()

                stored = UserEntity(name=user.name, lastname=user.lastname)
                session.add(stored)
                session.flush()
                logger.info("Inserted user %s", stored.id)
            return OperationResult.success(stored)
        except IntegrityError as e:
            logger.warning("Unique constraint rejected user %s %s: %s", user.name, user.lastname, e.orig)
            return OperationResult.conflict()
        except SQLAlchemyError as e:
            logger.error("Error saving user: %s", e, exc_info=True)
            return OperationResult.storage_error()

    def update_user(self, user: UserEntity) -> OperationResult[UserEntity]:
        """Overwrite an existing user unless another user holds its name and lastname."""
        if not _is_storable_id(user.id):
            logger.warning("User %s not found for update", user.id)
            return OperationResult.not_found()

        try:
            with self.session_scope() as session:
                stored = session.get(UserEntity, user.id)
                if stored is None:
                    logger.warning("User %s not found for update", user.id)
                    return OperationResult.not_found()

                if self._find_by_name(session, user.name, user.lastname, exclude_id=user.id) is not None:
                    logger.warning(
                        "Another user already holds %s %s, not updating user %s", user.name, user.lastname, user.id
                    )
                    return OperationResult.conflict()

                stored.name = user.name
                stored.lastname = user.lastname
                session.flush()
                logger.info("Updated user %s", stored.id)
            return OperationResult.success(stored)
        except IntegrityError as e:
            logger.warning("Unique constraint rejected update of user %s: %s", user.id, e.orig)
            return OperationResult.conflict()
        except SQLAlchemyError as e:
            logger.error("Error updating user %s: %s", user.id, e, exc_info=True)
            return OperationResult.storage_error()

    def delete_user(self, user: UserEntity) -> OperationResult[bool]:
        """Delete a user."""
        if not _is_storable_id(user.id):
            logger.warning("User %s not found for deletion", user.id)
            return OperationResult.not_found()

        try:
            with self.session_scope() as session:
                result = session.execute(delete(UserEntity).where(UserEntity.id == user.id))
                removed = result.rowcount > 0
        except SQLAlchemyError as e:
            logger.error("Error deleting user %s: %s", user.id, e, exc_info=True)
            return OperationResult.storage_error()

        if not removed:
            logger.warning("User %s not found for deletion", user.id)
            return OperationResult.not_found()
        logger.info("Deleted user %s", user.id)
        return OperationResult.success(True)
