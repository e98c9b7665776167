"""
Pydantic models for user data.

Request bodies use ``UserCreate`` and ``UserUpdate``; every field
defaults to an empty string so that presence checks happen in the
endpoints and an update replaces omitted fields with empty values.
Stored and returned users are ``User`` instances, which are frozen:
a record is replaced as a whole, never modified in place.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    # No coercion: a number sent for a string field is a decode error.
    model_config = ConfigDict(strict=True)

    name: str = Field("", examples=["John Doe"])
    email: str = Field("", examples=["john@example.com"])


class UserCreate(UserBase):
    """Schema for creating (or overwriting) a user.

    ``id`` is chosen by the caller; the services never generate
    identifiers.
    """

    id: str = Field("", examples=["1"])


class UserUpdate(UserBase):
    """Schema for replacing a user.

    The identifier always comes from the URL.  An ``id`` sent in the body
    is accepted and ignored.
    """

    id: str = ""


class User(UserBase):
    """A stored user record."""

    model_config = ConfigDict(frozen=True)

    id: str
