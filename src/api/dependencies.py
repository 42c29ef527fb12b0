"""FastAPI dependencies for authentication and database."""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyCookie
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.errors import TokenInvalidError, UnauthorizedError
from src.models.user import User
from src.services.auth import decode_access_token
from src.services.user_store import UserStore

logger = logging.getLogger(__name__)

settings = get_settings()

cookie_scheme = APIKeyCookie(name=settings.auth_cookie_name, auto_error=False)


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    """Get user store bound to the request's session."""
    return UserStore(db)


def get_current_user(
    token: Annotated[str | None, Depends(cookie_scheme)],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> User:
    """Get the current authenticated user from the auth cookie.

    Every failure is a 401; the message only says which step failed.
    """
    if not token:
        raise UnauthorizedError("Unauthorized: token not found")

    try:
        user_id = decode_access_token(token)
    except TokenInvalidError as e:
        logger.info(f"Rejected auth token: {e}")
        raise UnauthorizedError("Invalid token") from e

    user = store.find_by_id(user_id)
    if user is None:
        logger.warning(f"Valid token for missing user {user_id}")
        raise UnauthorizedError("Unauthorized: user not found")

    return user
