"""Use cases for updating a user's own profile."""

from typing import Any

from portal.domain.entities import User
from portal.domain.errors import ConflictError, PermissionDeniedError
from portal.infrastructure.repositories import UserRepository
from portal.infrastructure.security import get_password_hash
from portal.infrastructure.store import EntityStore

from .get_user import get_user
from .validators import ensure_supported_language


def _ensure_self(user_id: int, acting_user_id: int) -> None:
    if user_id != acting_user_id:
        raise PermissionDeniedError("Forbidden")


def update_user(
    store: EntityStore,
    *,
    user_id: int,
    acting_user_id: int,
    changes: dict[str, Any],
) -> User:
    """Merge ``changes`` into the profile of ``user_id``.

    Only the owner may edit a profile. Fields missing from ``changes`` keep
    their current values.
    """

    current_user = get_user(store, user_id)
    _ensure_self(user_id, acting_user_id)

    repository = UserRepository(store)
    updates = dict(changes)
    # Required profile fields cannot be cleared.
    for key in ("username", "nik", "full_name"):
        if key in updates and updates[key] is None:
            del updates[key]

    username = updates.get("username")
    if username is not None and username != current_user.username:
        existing = repository.get_by_username(username)
        if existing and existing.id != user_id:
            raise ConflictError("Username already taken")

    nik = updates.get("nik")
    if nik is not None and nik != current_user.nik:
        existing = repository.get_by_nik(nik)
        if existing and existing.id != user_id:
            raise ConflictError("NIK already registered")

    if "language" in updates:
        ensure_supported_language(updates["language"])

    password = updates.pop("password", None)
    if password:
        updates["password"] = get_password_hash(password)

    return repository.update(user_id, **updates)


def update_language(
    store: EntityStore,
    *,
    user_id: int,
    acting_user_id: int,
    language: str | None,
) -> User:
    """Change the preferred interface language of ``user_id``."""

    get_user(store, user_id)
    _ensure_self(user_id, acting_user_id)
    return UserRepository(store).update(
        user_id, language=ensure_supported_language(language or "")
    )
