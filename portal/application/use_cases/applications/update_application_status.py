"""Use case for moving an application through its lifecycle."""

import logging

from portal.domain.entities import Application
from portal.infrastructure.repositories import ApplicationRepository
from portal.infrastructure.store import EntityStore

from .validators import ensure_known_status

logger = logging.getLogger(__name__)


def update_application_status(
    store: EntityStore, *, application_id: int, status: str
) -> Application:
    """Set a new status on ``application_id`` after validating it."""

    updated = ApplicationRepository(store).update_status(
        application_id, ensure_known_status(status)
    )
    logger.info(
        "Application %s moved to status %s", updated.application_number, updated.status
    )
    return updated
