"""Domain entity representing a citizen account."""

from dataclasses import dataclass

LANGUAGE_INDONESIAN = "id"
LANGUAGE_ENGLISH = "en"
SUPPORTED_LANGUAGES = frozenset({LANGUAGE_INDONESIAN, LANGUAGE_ENGLISH})


@dataclass(frozen=True)
class User:
    """Core attributes describing a portal user."""

    id: int | None
    username: str
    password: str
    nik: str
    full_name: str
    birth_place: str | None = None
    birth_date: str | None = None
    gender: str | None = None
    religion: str | None = None
    marital_status: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    language: str = LANGUAGE_INDONESIAN


__all__ = [
    "User",
    "LANGUAGE_INDONESIAN",
    "LANGUAGE_ENGLISH",
    "SUPPORTED_LANGUAGES",
]
