"""Base class for SQLite client operations."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from common.config.database_config import DatabaseConfig
from common.infra.sqlite.entities import Base

logger = logging.getLogger(__name__)


class BaseSqliteClient:
    """Infrastructure layer: owns the engine and hands out scoped sessions."""

    def __init__(
        self,
        database_path: str | Path | None = None,
        config: DatabaseConfig | None = None,
        echo: bool | None = None,
    ) -> None:
        """Initialize the SQLite client.

        Args:
            database_path: Path to the database file. If None, uses config.database_path.
            config: Database configuration. If None, will load from environment.
            echo: Log emitted SQL. If None, uses config.database_echo.
        """
        if config is None:
            from common.config.database_config import get_database_config

            config = get_database_config()

        self.config = config
        self.database_path = Path(database_path or config.database_path)
        self.database_path.parent.mkdir(parents=True, exist_ok=True)

        self.engine: Engine = create_engine(
            f"sqlite:///{self.database_path}",
            echo=config.database_echo if echo is None else echo,
            connect_args={"check_same_thread": False},
        )
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

        self._ensure_tables_exist()

    def _ensure_tables_exist(self) -> None:
        """Create the tables if they don't exist yet."""
        Base.metadata.create_all(self.engine)
        logger.debug("Tables ensured in %s", self.database_path)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Provide a session that commits on success and rolls back on error.

        Yields:
            SQLAlchemy session bound to this client's engine
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def ping(self) -> bool:
        """Check that the database answers a trivial query."""
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error("Database ping failed for %s: %s", self.database_path, e)
            return False

    def close(self) -> None:
        """Dispose the engine and its pooled connections."""
        self.engine.dispose()
        logger.info("Closed SQLite engine for %s", self.database_path)
