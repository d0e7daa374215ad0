"""Aggregate application use cases."""

from .applications import submit_application
from .users import authenticate_user, create_user

__all__ = [
    "authenticate_user",
    "create_user",
    "submit_application",
]
