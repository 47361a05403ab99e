"""SQLAlchemy entities persisted in the local SQLite store."""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for all SQLite entities."""


class UserEntity(Base):
    """Persisted user row."""

    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("name", "lastname", name="uq_users_name_lastname"),
        # ids of deleted rows are never handed out again
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    lastname: Mapped[str] = mapped_column(String, nullable=False)

    def __repr__(self) -> str:
        return f"UserEntity(id={self.id!r}, name={self.name!r}, lastname={self.lastname!r})"
