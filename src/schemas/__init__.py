"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import UserData, UserEnvelope, UserLogin, UserPublic, UserRegister
from src.schemas.common import HealthResponse, MessageResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserPublic",
    "UserData",
    "UserEnvelope",
    "MessageResponse",
    "HealthResponse",
]
