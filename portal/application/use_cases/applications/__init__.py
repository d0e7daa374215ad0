"""Use cases for submitting and tracking service applications."""

from .get_application import get_user_application, list_user_applications
from .submit_application import submit_application
from .update_application_status import update_application_status
from .validators import ensure_known_status

__all__ = [
    "ensure_known_status",
    "get_user_application",
    "list_user_applications",
    "submit_application",
    "update_application_status",
]
