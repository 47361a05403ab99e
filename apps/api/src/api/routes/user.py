"""User API routes."""

import logging

from api.services import get_user_service
from common.models.results import OperationStatus
from common.models.user import User, UserModel
from common.services import user_mapper
from common.services.user_service import UserService
from fastapi import APIRouter, Depends, Response, status

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "User not found"}}
_CONFLICT = {status.HTTP_409_CONFLICT: {"description": "Another user has the same name and lastname"}}
_ERROR = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Unexpected error"}}


def _empty(status_code: int) -> Response:
    return Response(status_code=status_code)


@router.get("", response_model=list[User], responses=_ERROR)
@router.get("/", response_model=list[User], responses=_ERROR)
def get_users(service: UserService = Depends(get_user_service)) -> list[User] | Response:
    """Get all users in the database."""
    try:
        result = service.list_users()
        if not result.ok:
            logger.error("Could not read users from storage (%s)", result.status.value)
            return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)

        users = user_mapper.to_models(result.value)
        logger.info("Retrieved %d users", len(users))
        return users
    except Exception as e:
        logger.error("Unexpected error getting users: %s", e, exc_info=True)
        return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/{user_id}", response_model=User, responses={**_NOT_FOUND, **_ERROR})
def get_user_by_id(user_id: int, service: UserService = Depends(get_user_service)) -> User | Response:
    """Get a user by its ID.

    Args:
        user_id: ID of the user to look up
        service: User storage service

    Returns:
        The user with that ID
    """
    try:
        result = service.get_user_by_id(user_id)
        if result.status is OperationStatus.NOT_FOUND:
            logger.warning("User %s not found", user_id)
            return _empty(status.HTTP_404_NOT_FOUND)
        if not result.ok:
            logger.error("Could not read user %s from storage (%s)", user_id, result.status.value)
            return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info("Retrieved user %s", user_id)
        return user_mapper.to_model(result.value)
    except Exception as e:
        logger.error("Unexpected error getting user %s: %s", user_id, e, exc_info=True)
        return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.post("", response_model=bool, responses={**_CONFLICT, **_ERROR})
@router.post("/", response_model=bool, responses={**_CONFLICT, **_ERROR})
def save_user(user: UserModel, service: UserService = Depends(get_user_service)) -> bool | Response:
    """Save a new user.

    Args:
        user: Fields of the new user; any id in the body is ignored
        service: User storage service

    Returns:
        True when the user was stored
    """
    try:
        result = service.save_user(user_mapper.to_entity(user))
        if result.status is OperationStatus.CONFLICT:
            logger.warning("Could not create user: %s %s already exists", user.name, user.lastname)
            return _empty(status.HTTP_409_CONFLICT)
        if not result.ok:
            logger.error("Could not store user %s %s (%s)", user.name, user.lastname, result.status.value)
            return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info("Saved user %s", result.value.id)
        return True
    except Exception as e:
        logger.error("Unexpected error saving user: %s", e, exc_info=True)
        return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.put("/{user_id}", response_model=bool, responses={**_NOT_FOUND, **_CONFLICT, **_ERROR})
def update_user(user_id: int, user: UserModel, service: UserService = Depends(get_user_service)) -> bool | Response:
    """Update an existing user by its ID.

    Args:
        user_id: ID of the user to update
        user: New field values; any id in the body is ignored
        service: User storage service

    Returns:
        True when the user was updated
    """
    try:
        existing = service.get_user_by_id(user_id)
        if existing.status is OperationStatus.NOT_FOUND:
            logger.warning("User %s not found", user_id)
            return _empty(status.HTTP_404_NOT_FOUND)
        if not existing.ok:
            logger.error("Could not read user %s from storage (%s)", user_id, existing.status.value)
            return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)

        result = service.update_user(user_mapper.apply_model(user, existing.value))
        if result.status is OperationStatus.CONFLICT:
            logger.warning("Could not update user %s: %s %s already exists", user_id, user.name, user.lastname)
            return _empty(status.HTTP_409_CONFLICT)
        if result.status is OperationStatus.NOT_FOUND:
            logger.warning("User %s disappeared before update", user_id)
            return _empty(status.HTTP_404_NOT_FOUND)
        if not result.ok:
            logger.error("Could not update user %s (%s)", user_id, result.status.value)
            return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info("Updated user %s", user_id)
        return True
    except Exception as e:
        logger.error("Unexpected error updating user %s: %s", user_id, e, exc_info=True)
        return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.delete("/{user_id}", response_model=bool, responses={**_NOT_FOUND, **_ERROR})
def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> bool | Response:
    """Delete a user by its ID.

    Args:
        user_id: ID of the user to delete
        service: User storage service

    Returns:
        True when the user was deleted
    """
    try:
        existing = service.get_user_by_id(user_id)
        if existing.status is OperationStatus.NOT_FOUND:
            logger.warning("User %s not found", user_id)
            return _empty(status.HTTP_404_NOT_FOUND)
        if not existing.ok:
            logger.error("Could not read user %s from storage (%s)", user_id, existing.status.value)
            return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)

        result = service.delete_user(existing.value)
        if result.status is OperationStatus.NOT_FOUND:
            logger.warning("User %s disappeared before delete", user_id)
            return _empty(status.HTTP_404_NOT_FOUND)
        if not result.ok:
            logger.error("Could not delete user %s (%s)", user_id, result.status.value)
            return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info("Deleted user %s", user_id)
        return True
    except Exception as e:
        logger.error("Unexpected error deleting user %s: %s", user_id, e, exc_info=True)
        return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)
