"""User model."""

import uuid

from sqlalchemy import Boolean, Column, String, true
from sqlalchemy.orm import deferred

from src.database import Base
from src.models.mixins import TimestampMixin


def _new_user_id() -> str:
    return str(uuid.uuid4())


class User(Base, TimestampMixin):
    """User model for authentication.

    ``password_hash`` is deferred with ``raiseload``: it is not part of the
    default load and touching it on a plain query result raises instead of
    silently issuing a second SELECT. Only the login lookup undefers it.
    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_user_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = deferred(Column(String(255), nullable=False), raiseload=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
