"""Use cases for reading and acknowledging notifications."""

from portal.domain.entities import Notification
from portal.domain.errors import NotFoundError, PermissionDeniedError
from portal.infrastructure.repositories import NotificationRepository
from portal.infrastructure.store import EntityStore


def list_user_notifications(store: EntityStore, user_id: int) -> list[Notification]:
    """Return the notifications of ``user_id``, newest first."""

    return NotificationRepository(store).list_for_user(user_id)


def count_unread_notifications(store: EntityStore, user_id: int) -> int:
    return NotificationRepository(store).count_unread(user_id)


def mark_notification_as_read(
    store: EntityStore, *, notification_id: int, user_id: int
) -> Notification:
    """Mark one notification of ``user_id`` as read."""

    repository = NotificationRepository(store)
    notification = repository.get(notification_id)
    if notification is None:
        raise NotFoundError("Notification not found")
    if notification.user_id != user_id:
        raise PermissionDeniedError("Forbidden")
    return repository.mark_as_read(notification_id)


def mark_all_notifications_as_read(store: EntityStore, user_id: int) -> int:
    return NotificationRepository(store).mark_all_as_read(user_id)


__all__ = [
    "list_user_notifications",
    "count_unread_notifications",
    "mark_notification_as_read",
    "mark_all_notifications_as_read",
]
