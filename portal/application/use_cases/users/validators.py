"""Common validation helpers for user use cases."""

from portal.domain.entities import SUPPORTED_LANGUAGES
from portal.domain.errors import ValidationError


def ensure_supported_language(language: str) -> str:
    """Return ``language`` when it is ``"id"`` or ``"en"``, else raise."""

    if language not in SUPPORTED_LANGUAGES:
        raise ValidationError("Invalid language")
    return language
