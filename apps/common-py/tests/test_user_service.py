"""Tests for the SQLite user service."""

import pytest

from common.infra.sqlite.entities import Base, UserEntity
from common.models.results import OperationStatus
from common.services.user_service import SqliteUserService

pytestmark = pytest.mark.integration


def _user(name: str = "Ana", lastname: str = "Diaz", user_id: int | None = None) -> UserEntity:
    return UserEntity(id=user_id, name=name, lastname=lastname)


class TestSaveUser:
    """Insertion and the name/lastname uniqueness rule."""

    def test_save_assigns_id(self, user_service: SqliteUserService):
        result = user_service.save_user(_user())

        assert result.ok
        assert result.value.id == 1
        assert result.value.name == "Ana"

    def test_save_ignores_entity_id(self, user_service: SqliteUserService):
        result = user_service.save_user(_user(user_id=50))

        assert result.value.id == 1
        assert user_service.get_user_by_id(50).status is OperationStatus.NOT_FOUND

    def test_duplicate_is_conflict(self, user_service: SqliteUserService):
        user_service.save_user(_user())

        result = user_service.save_user(_user())

        assert result.status is OperationStatus.CONFLICT
        assert len(user_service.list_users().value) == 1

    def test_unique_constraint_backs_up_lookup(self, user_service: SqliteUserService, monkeypatch):
        """A writer that misses the lookup still cannot insert a duplicate."""
        user_service.save_user(_user())
        monkeypatch.setattr(SqliteUserService, "_find_by_name", staticmethod(lambda *args, **kwargs: None))

        result = user_service.save_user(_user())

        assert result.status is OperationStatus.CONFLICT
        assert len(user_service.list_users().value) == 1

    def test_ids_are_not_reused(self, user_service: SqliteUserService):
        first = user_service.save_user(_user()).value
        user_service.delete_user(first)

        second = user_service.save_user(_user()).value

        assert second.id == first.id + 1


class TestReadUsers:
    def test_list_empty(self, user_service: SqliteUserService):
        result = user_service.list_users()

        assert result.ok
        assert result.value == []

    def test_list_ordered_by_id(self, user_service: SqliteUserService):
        for name in ("Cleo", "Ana", "Bea"):
            user_service.save_user(_user(name=name))

        names = [user.name for user in user_service.list_users().value]

        assert names == ["Cleo", "Ana", "Bea"]

    def test_get_missing_user(self, user_service: SqliteUserService):
        assert user_service.get_user_by_id(3).status is OperationStatus.NOT_FOUND

    def test_find_user_by_name(self, user_service: SqliteUserService):
        saved = user_service.save_user(_user()).value

        assert user_service.find_user_by_name("Ana", "Diaz").id == saved.id
        assert user_service.find_user_by_name("Ana", "Diaz", exclude_id=saved.id) is None
        assert user_service.find_user_by_name("Ana", "Perez") is None


class TestUpdateUser:
    def test_update_overwrites_fields(self, user_service: SqliteUserService):
        saved = user_service.save_user(_user()).value
        saved.lastname = "Lopez"

        result = user_service.update_user(saved)

        assert result.ok
        stored = user_service.get_user_by_id(saved.id).value
        assert (stored.name, stored.lastname) == ("Ana", "Lopez")

    def test_update_keeping_own_values(self, user_service: SqliteUserService):
        saved = user_service.save_user(_user()).value

        assert user_service.update_user(saved).ok

    def test_update_colliding_with_other_user(self, user_service: SqliteUserService):
        user_service.save_user(_user("Ana", "Diaz"))
        other = user_service.save_user(_user("Luis", "Gomez")).value

        result = user_service.update_user(_user("Ana", "Diaz", user_id=other.id))

        assert result.status is OperationStatus.CONFLICT
        stored = user_service.get_user_by_id(other.id).value
        assert (stored.name, stored.lastname) == ("Luis", "Gomez")

    def test_unique_constraint_backs_up_update_lookup(self, user_service: SqliteUserService, monkeypatch):
        """An update that misses the lookup still cannot take another user's name and lastname."""
        user_service.save_user(_user("Ana", "Diaz"))
        other = user_service.save_user(_user("Luis", "Gomez")).value
        monkeypatch.setattr(SqliteUserService, "_find_by_name", staticmethod(lambda *args, **kwargs: None))

        result = user_service.update_user(_user("Ana", "Diaz", user_id=other.id))

        assert result.status is OperationStatus.CONFLICT
        stored = user_service.get_user_by_id(other.id).value
        assert (stored.name, stored.lastname) == ("Luis", "Gomez")

    def test_update_missing_user(self, user_service: SqliteUserService):
        result = user_service.update_user(_user(user_id=9))

        assert result.status is OperationStatus.NOT_FOUND
        assert user_service.list_users().value == []


class TestDeleteUser:
    def test_delete_user(self, user_service: SqliteUserService):
        saved = user_service.save_user(_user()).value

        result = user_service.delete_user(saved)

        assert result.ok
        assert result.value is True
        assert user_service.get_user_by_id(saved.id).status is OperationStatus.NOT_FOUND

    def test_delete_missing_user(self, user_service: SqliteUserService):
        assert user_service.delete_user(_user(user_id=4)).status is OperationStatus.NOT_FOUND


class TestStorageErrors:
    """Failures are reported as STORAGE_ERROR rather than empty or missing results."""

    @pytest.fixture(autouse=True)
    def drop_tables(self, user_service: SqliteUserService):
        Base.metadata.drop_all(user_service.engine)

    def test_list(self, user_service: SqliteUserService):
        result = user_service.list_users()

        assert result.status is OperationStatus.STORAGE_ERROR
        assert result.value is None

    def test_get(self, user_service: SqliteUserService):
        assert user_service.get_user_by_id(1).status is OperationStatus.STORAGE_ERROR

    def test_save(self, user_service: SqliteUserService):
        assert user_service.save_user(_user()).status is OperationStatus.STORAGE_ERROR

    def test_update(self, user_service: SqliteUserService):
        assert user_service.update_user(_user(user_id=1)).status is OperationStatus.STORAGE_ERROR

    def test_delete(self, user_service: SqliteUserService):
        assert user_service.delete_user(_user(user_id=1)).status is OperationStatus.STORAGE_ERROR


def test_table_creation_is_idempotent(tmp_path):
    path = tmp_path / "nested" / "users.db"
    first = SqliteUserService(database_path=path)
    first.save_user(_user())
    first.close()

    second = SqliteUserService(database_path=path)
    try:
        assert [user.name for user in second.list_users().value] == ["Ana"]
        assert second.ping() is True
    finally:
        second.close()


@pytest.mark.parametrize("user_id", [2**63, -(2**63) - 1])
def test_ids_outside_integer_range_are_not_found(user_service: SqliteUserService, user_id: int):
    user_service.save_user(_user())

    assert user_service.get_user_by_id(user_id).status is OperationStatus.NOT_FOUND
    assert user_service.update_user(_user("Eva", "Ruiz", user_id=user_id)).status is OperationStatus.NOT_FOUND
    assert user_service.delete_user(_user(user_id=user_id)).status is OperationStatus.NOT_FOUND
    assert len(user_service.list_users().value) == 1
