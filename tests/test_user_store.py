"""Credential store tests."""

import pytest
from sqlalchemy.exc import InvalidRequestError

from src.errors import DuplicateKeyError
from src.services.auth import get_password_hash, verify_password
from src.services.user_store import UserStore


@pytest.fixture
def user(store):
    return store.create(
        name="Alice", email="Alice@Example.com", password_hash=get_password_hash("secret-pw")
    )


def test_create_assigns_defaults(user):
    assert user.id
    assert user.email == "alice@example.com"
    assert user.is_active is True
    assert user.created_at is not None
    assert user.updated_at is not None


def test_find_by_email_is_case_insensitive(store, user):
    found = store.find_by_email("  ALICE@example.com")
    assert found is not None
    assert found.id == user.id


def test_find_by_email_missing(store):
    assert store.find_by_email("nobody@example.com") is None


def test_find_by_id(store, user):
    assert store.find_by_id(user.id).email == "alice@example.com"
    assert store.find_by_id("missing") is None


def test_default_projection_does_not_load_hash(db, user):
    db.expunge_all()
    found = UserStore(db).find_by_email("alice@example.com")
    with pytest.raises(InvalidRequestError):
        _ = found.password_hash


def test_find_with_secret_loads_hash(db, user):
    db.expunge_all()
    found = UserStore(db).find_by_email_with_secret("alice@example.com")
    assert verify_password("secret-pw", found.password_hash)


def test_find_with_secret_after_default_load(store, user):
    store.find_by_email("alice@example.com")
    found = store.find_by_email_with_secret("alice@example.com")
    assert verify_password("secret-pw", found.password_hash)


def test_duplicate_email_rejected(store, user):
    with pytest.raises(DuplicateKeyError):
        store.create(name="Other", email="ALICE@example.com", password_hash="x")
    # Session is usable after the rejected write
    assert store.find_by_email("alice@example.com").name == "Alice"
