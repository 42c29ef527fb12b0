"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserRegister(BaseModel):
    """User registration request.

    Fields are optional here so that missing or blank values get the
    handler's own 400 message instead of a generic validation error.
    """

    name: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)


class UserLogin(BaseModel):
    """User login request."""

    email: str | None = Field(None, max_length=255)
    password: str | None = None


class UserPublic(BaseModel):
    """User information safe to return to clients.

    There is no password field on this type, so nothing serialized through
    it can leak the hash.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(serialization_alias="_id")
    name: str
    email: str
    is_active: bool = Field(serialization_alias="isActive")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")


class UserData(BaseModel):
    """Payload wrapping a single user."""

    user: UserPublic


class UserEnvelope(BaseModel):
    """Success envelope for endpoints that return a user."""

    success: bool = True
    message: str
    data: UserData

    @classmethod
    def for_user(cls, user, message: str) -> "UserEnvelope":
        return cls(message=message, data=UserData(user=UserPublic.model_validate(user)))
