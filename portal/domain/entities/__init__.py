"""Domain entities exposed by the application."""

from .application import (
    APPLICATION_STATUS_COMPLETED,
    APPLICATION_STATUS_PENDING,
    APPLICATION_STATUS_PROCESSING,
    APPLICATION_STATUS_REJECTED,
    APPLICATION_STATUS_REVISION,
    APPLICATION_STATUSES,
    Application,
)
from .notification import (
    NOTIFICATION_TYPE_ERROR,
    NOTIFICATION_TYPE_INFO,
    NOTIFICATION_TYPE_SUCCESS,
    Notification,
)
from .service import Service
from .service_category import ServiceCategory
from .user import LANGUAGE_ENGLISH, LANGUAGE_INDONESIAN, SUPPORTED_LANGUAGES, User

__all__ = [
    "Application",
    "APPLICATION_STATUSES",
    "APPLICATION_STATUS_PENDING",
    "APPLICATION_STATUS_PROCESSING",
    "APPLICATION_STATUS_COMPLETED",
    "APPLICATION_STATUS_REVISION",
    "APPLICATION_STATUS_REJECTED",
    "Notification",
    "NOTIFICATION_TYPE_INFO",
    "NOTIFICATION_TYPE_SUCCESS",
    "NOTIFICATION_TYPE_ERROR",
    "Service",
    "ServiceCategory",
    "User",
    "LANGUAGE_INDONESIAN",
    "LANGUAGE_ENGLISH",
    "SUPPORTED_LANGUAGES",
]
