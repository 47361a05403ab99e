"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure 'apps/api/src' is on sys.path for absolute 'api.*' imports
_TESTS_DIR = os.path.dirname(__file__)
_SRC_PATH = os.path.abspath(os.path.join(_TESTS_DIR, "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from api.main import app  # noqa: E402
from api.services import get_user_service  # noqa: E402
from common.services.user_service import SqliteUserService  # noqa: E402


@pytest.fixture
def user_service(tmp_path: Path) -> Iterator[SqliteUserService]:
    """User service backed by a throwaway SQLite file."""
    service = SqliteUserService(database_path=tmp_path / "users.db")
    yield service
    service.close()


@pytest.fixture
def client(user_service: SqliteUserService) -> Iterator[TestClient]:
    """Create a FastAPI test client wired to the throwaway user service."""
    app.dependency_overrides[get_user_service] = lambda: user_service
    yield TestClient(app)
    app.dependency_overrides.clear()
