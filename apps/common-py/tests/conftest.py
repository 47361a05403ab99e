"""Pytest configuration for common-py tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from common.services.user_service import SqliteUserService


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests that touch a real database file"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow running"
    )


@pytest.fixture
def user_service(tmp_path: Path) -> Iterator[SqliteUserService]:
    """User service on a fresh SQLite file."""
    service = SqliteUserService(database_path=tmp_path / "users.db")
    yield service
    service.close()
