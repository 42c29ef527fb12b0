"""Authentication service for JWT and password handling."""

import uuid
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from src.config import get_settings
from src.errors import TokenInvalidError

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: str) -> str:
    """Create a JWT access token for a user."""
    issued_at = datetime.now(UTC)
    to_encode = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiration_days),
        # Two tokens for the same user in the same second must still differ
        "jti": uuid.uuid4().hex,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> str:
    """Decode and validate a JWT token, returning the user id it was issued for.

    Raises TokenInvalidError on a bad signature, a malformed token, a missing
    subject, or an expiry in the past.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise TokenInvalidError(str(e)) from e

    user_id = payload.get("sub")
    if not user_id:
        raise TokenInvalidError("Token has no subject")
    return user_id
