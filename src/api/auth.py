"""Authentication API endpoints."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.api.dependencies import get_current_user, get_user_store
from src.config import get_settings
from src.errors import (
    BadRequestError,
    ConflictError,
    DuplicateKeyError,
    InternalServerError,
    NotFoundError,
    UnauthorizedError,
)
from src.models.user import User
from src.schemas.auth import UserEnvelope, UserLogin, UserRegister
from src.schemas.common import MessageResponse
from src.services.auth import create_access_token, get_password_hash, verify_password
from src.services.user_store import UserStore

logger = logging.getLogger(__name__)

settings = get_settings()

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _cookie_options() -> dict[str, Any]:
    """Attributes shared by setting and clearing the auth cookie."""
    return {
        "httponly": True,
        "samesite": "strict",
        "secure": settings.is_production,
        "path": "/",
    }


def set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=settings.token_max_age_seconds,
        **_cookie_options(),
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(key=settings.auth_cookie_name, **_cookie_options())


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@router.post("/register", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    response: Response,
    store: Annotated[UserStore, Depends(get_user_store)],
):
    """Register a new user."""
    if any(_is_blank(v) for v in (user_data.name, user_data.email, user_data.password)):
        raise BadRequestError("All fields are required")

    try:
        if store.find_by_email(user_data.email):
            raise ConflictError("User already exists")

        user = store.create(
            name=user_data.name,
            email=user_data.email,
            password_hash=get_password_hash(user_data.password),
        )
        access_token = create_access_token(user.id)
    except HTTPException:
        raise
    except DuplicateKeyError as e:
        # Lost a race with a concurrent registration for the same email
        raise ConflictError("User already exists") from e
    except Exception as e:
        logger.exception(f"Registration failed for {user_data.email}")
        raise InternalServerError() from e

    set_auth_cookie(response, access_token)
    logger.info(f"Registered user {user.id} ({user.email})")

    return UserEnvelope.for_user(user, "User registered successfully")


@router.post("/login", response_model=UserEnvelope)
def login(
    credentials: UserLogin,
    response: Response,
    store: Annotated[UserStore, Depends(get_user_store)],
):
    """Login with email and password."""
    if _is_blank(credentials.email) or _is_blank(credentials.password):
        raise BadRequestError("Email and password are required")

    try:
        user = store.find_by_email_with_secret(credentials.email)
        if user is None:
            raise NotFoundError("User not found")

        if not verify_password(credentials.password, user.password_hash):
            raise UnauthorizedError("Invalid password")

        access_token = create_access_token(user.id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Login failed for {credentials.email}")
        raise InternalServerError() from e

    set_auth_cookie(response, access_token)
    logger.info(f"Login: {user.id} ({user.email})")

    return UserEnvelope.for_user(user, "Login successful")


@router.get("/logout", response_model=MessageResponse)
async def logout(response: Response):
    """Logout by clearing the auth cookie.

    Tokens are not revoked server-side; one replayed before its expiry is
    still accepted.
    """
    clear_auth_cookie(response)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserEnvelope)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return UserEnvelope.for_user(current_user, "Authenticated user")
