from .application import ApplicationCreate, ApplicationRead
from .auth import LoginRequest, MessageResponse, Token
from .notification import MarkAllReadResponse, NotificationRead, UnreadCountRead
from .service import ServiceCategoryRead, ServiceRead
from .user import LanguageUpdate, UserCreate, UserRead, UserUpdate

__all__ = [
    "ApplicationCreate",
    "ApplicationRead",
    "LanguageUpdate",
    "LoginRequest",
    "MarkAllReadResponse",
    "MessageResponse",
    "NotificationRead",
    "ServiceCategoryRead",
    "ServiceRead",
    "Token",
    "UnreadCountRead",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
