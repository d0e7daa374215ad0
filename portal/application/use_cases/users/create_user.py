"""Use case for registering users."""

import logging

from portal.domain.entities import LANGUAGE_INDONESIAN, User
from portal.domain.errors import ConflictError
from portal.infrastructure.repositories import UserRepository
from portal.infrastructure.security import get_password_hash
from portal.infrastructure.store import EntityStore

from .validators import ensure_supported_language

logger = logging.getLogger(__name__)


def create_user(
    store: EntityStore,
    *,
    username: str,
    password: str,
    nik: str,
    full_name: str,
    birth_place: str | None = None,
    birth_date: str | None = None,
    gender: str | None = None,
    religion: str | None = None,
    marital_status: str | None = None,
    address: str | None = None,
    phone: str | None = None,
    email: str | None = None,
    language: str | None = None,
) -> User:
    """Create a new user ensuring unique usernames and NIKs.

    The store enforces the same constraints; checking here first keeps the
    error messages specific to the offending field.
    """

    repository = UserRepository(store)

    if repository.get_by_username(username):
        raise ConflictError("Username already taken")
    if repository.get_by_nik(nik):
        raise ConflictError("NIK already registered")

    user = User(
        id=None,
        username=username,
        password=get_password_hash(password),
        nik=nik,
        full_name=full_name,
        birth_place=birth_place,
        birth_date=birth_date,
        gender=gender,
        religion=religion,
        marital_status=marital_status,
        address=address,
        phone=phone,
        email=email,
        language=ensure_supported_language(language or LANGUAGE_INDONESIAN),
    )
    created = repository.create(user)
    logger.info("Registered user %s (id=%s)", created.username, created.id)
    return created
