"""Repository implementations for infrastructure layer."""

from .application_repository import ApplicationRepository
from .notification_repository import NotificationRepository
from .service_category_repository import ServiceCategoryRepository
from .service_repository import ServiceRepository
from .user_repository import UserRepository

__all__ = [
    "ApplicationRepository",
    "NotificationRepository",
    "ServiceCategoryRepository",
    "ServiceRepository",
    "UserRepository",
]
