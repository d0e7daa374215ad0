"""Use case for submitting a service application."""

import logging
from dataclasses import replace
from typing import Any

from portal.domain.entities import NOTIFICATION_TYPE_INFO, Application, Notification
from portal.infrastructure.repositories import ApplicationRepository, NotificationRepository
from portal.infrastructure.store import EntityStore

from ..services import get_service
from .validators import ensure_known_status

logger = logging.getLogger(__name__)

SUBMITTED_TITLE = "Permohonan berhasil diajukan"
SUBMITTED_MESSAGE = (
    "Permohonan Anda dengan nomor {number} telah berhasil diajukan dan sedang diproses."
)


def submit_application(
    store: EntityStore,
    *,
    user_id: int,
    service_id: int,
    form_data: dict[str, Any] | None = None,
    status: str | None = None,
) -> Application:
    """File an application for ``service_id`` and notify its owner.

    Exactly one notification referencing the new application number is
    created for ``user_id``.
    """

    get_service(store, service_id)
    application = Application(
        id=None,
        user_id=user_id,
        service_id=service_id,
        form_data=dict(form_data or {}),
    )
    if status is not None:
        application = replace(application, status=ensure_known_status(status))

    created = ApplicationRepository(store).create(application)

    NotificationRepository(store).create(
        Notification(
            id=None,
            user_id=user_id,
            title=SUBMITTED_TITLE,
            message=SUBMITTED_MESSAGE.format(number=created.application_number),
            type=NOTIFICATION_TYPE_INFO,
        )
    )
    logger.info(
        "User %s submitted application %s for service %s",
        user_id,
        created.application_number,
        service_id,
    )
    return created
