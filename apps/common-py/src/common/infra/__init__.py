"""Infrastructure layer for external communication."""

from common.infra.sqlite.entities import Base, UserEntity
from common.infra.sqlite.sqlite_base import BaseSqliteClient

__all__ = ["Base", "BaseSqliteClient", "UserEntity"]
