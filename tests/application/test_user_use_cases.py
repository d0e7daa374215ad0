"""Tests for the user use cases."""

from __future__ import annotations

import pytest

from portal.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    create_user,
    get_user,
    update_language,
    update_user,
)
from portal.domain.errors import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from portal.infrastructure.security import verify_password
from portal.infrastructure.store import EntityStore


def _register(store: EntityStore, username: str = "siti", nik: str = "3174000000000001"):
    return create_user(
        store, username=username, password="rahasia", nik=nik, full_name="Siti Aminah"
    )


def test_create_user_hashes_password_and_defaults_language(seeded_store: EntityStore) -> None:
    user = _register(seeded_store)

    assert user.id == 2
    assert user.language == "id"
    assert user.password != "rahasia"
    assert verify_password("rahasia", user.password)


@pytest.mark.parametrize(
    ("username", "nik", "message"),
    [
        ("budisantoso", "3174000000000001", "Username already taken"),
        ("siti", "1234567890123456", "NIK already registered"),
    ],
)
def test_create_user_rejects_duplicates(seeded_store, username, nik, message) -> None:
    with pytest.raises(ConflictError, match=message):
        _register(seeded_store, username=username, nik=nik)


def test_create_user_rejects_unknown_language(store: EntityStore) -> None:
    with pytest.raises(ValidationError):
        create_user(
            store, username="a", password="b", nik="1" * 16, full_name="A", language="fr"
        )


def test_get_user_missing(store: EntityStore) -> None:
    with pytest.raises(NotFoundError, match="User not found"):
        get_user(store, 1)


def test_authenticate_user(seeded_store: EntityStore) -> None:
    user, status = authenticate_user(seeded_store, "budisantoso", "password123")
    assert status is AuthenticationStatus.SUCCESS
    assert user.id == 1

    for username, password in (("budisantoso", "wrong"), ("ghost", "password123")):
        user, status = authenticate_user(seeded_store, username, password)
        assert user is None
        assert status is AuthenticationStatus.INVALID_CREDENTIALS


def test_update_user_merges_changes(seeded_store: EntityStore) -> None:
    updated = update_user(
        seeded_store,
        user_id=1,
        acting_user_id=1,
        changes={"phone": "089999", "password": "baru123"},
    )

    assert updated.phone == "089999"
    assert updated.full_name == "Budi Santoso"
    assert verify_password("baru123", updated.password)


def test_update_user_is_self_only(seeded_store: EntityStore) -> None:
    other = _register(seeded_store)

    with pytest.raises(PermissionDeniedError):
        update_user(seeded_store, user_id=1, acting_user_id=other.id, changes={"phone": "1"})
    with pytest.raises(NotFoundError):
        update_user(seeded_store, user_id=99, acting_user_id=99, changes={})


def test_update_user_rejects_taken_username(seeded_store: EntityStore) -> None:
    other = _register(seeded_store)

    with pytest.raises(ConflictError, match="Username already taken"):
        update_user(
            seeded_store,
            user_id=other.id,
            acting_user_id=other.id,
            changes={"username": "budisantoso"},
        )


@pytest.mark.parametrize("language", [None, "", "fr", "ID"])
def test_update_language_rejects_unsupported_values(seeded_store, language) -> None:
    with pytest.raises(ValidationError, match="Invalid language"):
        update_language(seeded_store, user_id=1, acting_user_id=1, language=language)


def test_update_language(seeded_store: EntityStore) -> None:
    assert update_language(seeded_store, user_id=1, acting_user_id=1, language="en").language == "en"
