"""Use case for retrieving a single user."""

from portal.domain.entities import User
from portal.domain.errors import NotFoundError
from portal.infrastructure.repositories import UserRepository
from portal.infrastructure.store import EntityStore


def get_user(store: EntityStore, user_id: int) -> User:
    """Return the requested user or raise an error if it does not exist."""

    user = UserRepository(store).get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user
