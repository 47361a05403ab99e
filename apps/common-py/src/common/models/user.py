"""User models for User API."""

from typing import ClassVar

from pydantic import BaseModel, Field


class UserModel(BaseModel):
    """User fields accepted from callers.

    The identifier is server-assigned, so an ``id`` key in a request body is ignored.
    """

    name: str = Field(..., description="First name of the user")
    lastname: str = Field(..., description="Last name of the user")

    class Config:
        """Pydantic config."""

        extra = "ignore"
        json_schema_extra: ClassVar[dict] = {
            "example": {
                "name": "Ana",
                "lastname": "Diaz",
            }
        }


class User(UserModel):
    """User as returned by the API."""

    id: int = Field(..., description="Server-assigned identifier of the user")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "id": 1,
                "name": "Ana",
                "lastname": "Diaz",
            }
        }
