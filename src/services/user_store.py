"""Credential store for user records."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, undefer

from src.errors import DuplicateKeyError
from src.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Emails are stored and looked up trimmed and lowercased."""
    return email.strip().lower()


class UserStore:
    """Persistence operations for users.

    Every read except ``find_by_email_with_secret`` returns users whose
    password hash is not loaded.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == normalize_email(email)).first()

    def find_by_email_with_secret(self, email: str) -> User | None:
        """Get a user by email with the password hash loaded, for login only."""
        return (
            self.db.query(User)
            .options(undefer(User.password_hash))
            .populate_existing()
            .filter(User.email == normalize_email(email))
            .first()
        )

    def find_by_id(self, user_id: str) -> User | None:
        """Get a user by id."""
        return self.db.query(User).filter(User.id == user_id).first()

    def create(self, name: str, email: str, password_hash: str) -> User:
        """Create a new user.

        Raises DuplicateKeyError when the email is already taken, including
        when a concurrent registration wins the race after our pre-check.
        """
        normalized = normalize_email(email)
        user = User(name=name.strip(), email=normalized, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Rejected duplicate user email: {normalized}")
            raise DuplicateKeyError(f"User with email {normalized} already exists") from e
        self.db.refresh(user)
        return user
