"""Domain entity representing a service application submitted by a user."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

APPLICATION_STATUS_PENDING = "pending"
APPLICATION_STATUS_PROCESSING = "processing"
APPLICATION_STATUS_COMPLETED = "completed"
APPLICATION_STATUS_REVISION = "revision"
APPLICATION_STATUS_REJECTED = "rejected"

APPLICATION_STATUSES = (
    APPLICATION_STATUS_PENDING,
    APPLICATION_STATUS_PROCESSING,
    APPLICATION_STATUS_COMPLETED,
    APPLICATION_STATUS_REVISION,
    APPLICATION_STATUS_REJECTED,
)


@dataclass(frozen=True)
class Application:
    """Request filed by ``user_id`` for ``service_id``.

    ``application_number``, ``submitted_at`` and ``updated_at`` are filled in
    by the repository when the application is created.
    """

    id: int | None
    user_id: int
    service_id: int
    application_number: str | None = None
    status: str = APPLICATION_STATUS_PENDING
    submitted_at: datetime | None = None
    updated_at: datetime | None = None
    form_data: dict[str, Any] = field(default_factory=dict)


__all__ = [
    "Application",
    "APPLICATION_STATUSES",
    "APPLICATION_STATUS_PENDING",
    "APPLICATION_STATUS_PROCESSING",
    "APPLICATION_STATUS_COMPLETED",
    "APPLICATION_STATUS_REVISION",
    "APPLICATION_STATUS_REJECTED",
]
