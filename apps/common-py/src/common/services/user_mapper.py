"""Mapping between persisted user entities and API user models."""

from collections.abc import Iterable

from common.infra.sqlite.entities import UserEntity
from common.models.user import User, UserModel

# Fields copied in both directions; the id is never taken from a caller.
_MAPPED_FIELDS = ("name", "lastname")


def to_model(entity: UserEntity) -> User:
    """Convert a persisted entity into the API model, id included."""
    return User(id=entity.id, **{field: getattr(entity, field) for field in _MAPPED_FIELDS})


def to_models(entities: Iterable[UserEntity]) -> list[User]:
    return [to_model(entity) for entity in entities]


def to_entity(model: UserModel) -> UserEntity:
    """Build a new, unsaved entity from caller data.

    Args:
        model: Caller-supplied user fields

    Returns:
        UserEntity without an id; storage assigns one on insert
    """
    return UserEntity(**{field: getattr(model, field) for field in _MAPPED_FIELDS})


def apply_model(model: UserModel, entity: UserEntity) -> UserEntity:
    """Overwrite the non-id fields of an already loaded entity.

    Args:
        model: Caller-supplied user fields
        entity: Entity loaded from storage, carrying its real id

    Returns:
        The same entity instance, updated in place
    """
    for field in _MAPPED_FIELDS:
        setattr(entity, field, getattr(model, field))
    return entity
