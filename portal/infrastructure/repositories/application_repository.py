"""Persistence helpers for service applications."""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable
from dataclasses import replace

from portal.domain.entities import APPLICATION_STATUS_PENDING, Application
from portal.domain.errors import ConflictError
from portal.infrastructure.store import EntityKind, EntityStore
from portal.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

APPLICATION_NUMBER_PREFIX = "P-"
APPLICATION_NUMBER_SPACE = 10_000_000
MAX_NUMBER_ATTEMPTS = 20


def _random_sequence() -> int:
    return secrets.randbelow(APPLICATION_NUMBER_SPACE)


class ApplicationRepository:
    """Provide CRUD operations for :class:`Application` objects.

    Application numbers look like ``P-250001234``: the prefix, the last two
    digits of the current year and a zero-padded random seven digit number.
    ``sequence_factory`` supplies the random part and can be replaced in
    tests.
    """

    def __init__(
        self,
        store: EntityStore,
        *,
        sequence_factory: Callable[[], int] = _random_sequence,
    ) -> None:
        self.store = store
        self._sequence_factory = sequence_factory

    def list_for_user(self, user_id: int) -> list[Application]:
        return self.store.scan(
            EntityKind.APPLICATION, lambda application: application.user_id == user_id
        )

    def get(self, application_id: int) -> Application | None:
        return self.store.get(EntityKind.APPLICATION, application_id)

    def get_by_application_number(self, application_number: str) -> Application | None:
        matches = self.store.scan(
            EntityKind.APPLICATION,
            lambda application: application.application_number == application_number,
        )
        return matches[0] if matches else None

    def create(self, application: Application) -> Application:
        now = now_in_app_timezone()
        status = application.status or APPLICATION_STATUS_PENDING
        for attempt in range(1, MAX_NUMBER_ATTEMPTS + 1):
            number = self._generate_number(now.year)
            if self.get_by_application_number(number) is not None:
                logger.warning("Application number %s already issued (attempt %d)", number, attempt)
                continue
            candidate = replace(
                application,
                application_number=number,
                status=status,
                submitted_at=now,
                updated_at=now,
                form_data=dict(application.form_data or {}),
            )
            try:
                return self.store.insert(EntityKind.APPLICATION, candidate)
            except ConflictError:
                # Another thread claimed the number between the lookup and the insert.
                logger.warning("Application number %s already issued (attempt %d)", number, attempt)
        msg = "Could not allocate a unique application number"
        raise ConflictError(msg)

    def update_status(self, application_id: int, status: str) -> Application:
        """Set ``status`` and refresh ``updated_at``; other fields are untouched."""

        return self.store.update(
            EntityKind.APPLICATION,
            application_id,
            {"status": status, "updated_at": now_in_app_timezone()},
        )

    def _generate_number(self, year: int) -> str:
        sequence = self._sequence_factory() % APPLICATION_NUMBER_SPACE
        return f"{APPLICATION_NUMBER_PREFIX}{year % 100:02d}{sequence:07d}"


__all__ = ["ApplicationRepository"]
