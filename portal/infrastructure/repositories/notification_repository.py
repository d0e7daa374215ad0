"""Persistence helpers for notification entities."""

from __future__ import annotations

from dataclasses import replace

from portal.domain.entities import Notification
from portal.infrastructure.store import EntityKind, EntityStore
from portal.utils import now_in_app_timezone


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def list_for_user(self, user_id: int) -> list[Notification]:
        """Return the notifications of ``user_id``, newest first."""

        notifications = self.store.scan(
            EntityKind.NOTIFICATION, lambda notification: notification.user_id == user_id
        )
        return sorted(
            notifications,
            key=lambda notification: (notification.created_at, notification.id),
            reverse=True,
        )

    def count_unread(self, user_id: int) -> int:
        return self.store.count(
            EntityKind.NOTIFICATION,
            lambda notification: notification.user_id == user_id and not notification.is_read,
        )

    def get(self, notification_id: int) -> Notification | None:
        return self.store.get(EntityKind.NOTIFICATION, notification_id)

    def create(self, notification: Notification) -> Notification:
        candidate = replace(notification, is_read=False, created_at=now_in_app_timezone())
        return self.store.insert(EntityKind.NOTIFICATION, candidate)

    def mark_as_read(self, notification_id: int) -> Notification:
        return self.store.update(EntityKind.NOTIFICATION, notification_id, {"is_read": True})

    def mark_all_as_read(self, user_id: int) -> int:
        """Mark every unread notification of ``user_id`` as read.

        Returns how many notifications changed; zero when none were unread.
        """

        unread = self.store.scan(
            EntityKind.NOTIFICATION,
            lambda notification: notification.user_id == user_id and not notification.is_read,
        )
        for notification in unread:
            self.store.update(EntityKind.NOTIFICATION, notification.id, {"is_read": True})
        return len(unread)


__all__ = ["NotificationRepository"]
