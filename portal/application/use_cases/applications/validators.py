"""Validation helpers for application use cases."""

from portal.domain.entities import APPLICATION_STATUSES
from portal.domain.errors import ValidationError


def ensure_known_status(status: str) -> str:
    """Return ``status`` when it is one of the application statuses, else raise."""

    if status not in APPLICATION_STATUSES:
        allowed = ", ".join(APPLICATION_STATUSES)
        raise ValidationError(f"Invalid status '{status}'. Expected one of: {allowed}")
    return status
