"""Endpoints for the authenticated user's notifications."""

from fastapi import APIRouter, Depends

from portal.application.use_cases.notifications import (
    count_unread_notifications,
    list_user_notifications,
    mark_all_notifications_as_read,
    mark_notification_as_read,
)
from portal.domain.entities import User
from portal.domain.errors import PortalError
from portal.infrastructure.store import EntityStore
from portal.interfaces.api.dependencies import get_current_user, get_store
from portal.interfaces.api.routes_helpers import to_http_exception
from portal.interfaces.api.schemas import (
    MarkAllReadResponse,
    NotificationRead,
    UnreadCountRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationRead])
def list_notifications(
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """Return the notifications of the authenticated user, newest first."""

    return [
        NotificationRead.model_validate(notification)
        for notification in list_user_notifications(store, current_user.id)
    ]


@router.get("/unread-count", response_model=UnreadCountRead)
def unread_count(
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    return UnreadCountRead(count=count_unread_notifications(store, current_user.id))


@router.put("/read-all", response_model=MarkAllReadResponse)
def mark_all_as_read(
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    updated = mark_all_notifications_as_read(store, current_user.id)
    return MarkAllReadResponse(message="All notifications marked as read", updated=updated)


@router.put("/{notification_id}/read", response_model=NotificationRead)
def mark_as_read(
    notification_id: int,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    try:
        notification = mark_notification_as_read(
            store, notification_id=notification_id, user_id=current_user.id
        )
    except PortalError as exc:
        raise to_http_exception(exc) from exc
    return NotificationRead.model_validate(notification)
