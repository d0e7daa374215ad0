"""Use case for authenticating a user."""

import logging
from enum import Enum, auto

from portal.infrastructure.repositories import UserRepository
from portal.infrastructure.security import verify_password
from portal.infrastructure.store import EntityStore

logger = logging.getLogger(__name__)


class AuthenticationStatus(Enum):
    """Possible outcomes when attempting to authenticate a user."""

    SUCCESS = auto()
    INVALID_CREDENTIALS = auto()


def authenticate_user(store: EntityStore, username: str, password: str):
    """Return the authentication result along with the user when possible."""

    user = UserRepository(store).get_by_username(username)

    if not user or not verify_password(password, user.password):
        logger.info("Rejected login attempt for %s", username)
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    return user, AuthenticationStatus.SUCCESS
