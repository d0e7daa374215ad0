"""Use cases for reading a user's applications."""

from portal.domain.entities import Application
from portal.domain.errors import NotFoundError, PermissionDeniedError
from portal.infrastructure.repositories import ApplicationRepository
from portal.infrastructure.store import EntityStore


def list_user_applications(store: EntityStore, user_id: int) -> list[Application]:
    """Return the applications filed by ``user_id`` in submission order."""

    return ApplicationRepository(store).list_for_user(user_id)


def get_user_application(
    store: EntityStore, *, application_id: int, user_id: int
) -> Application:
    """Return an application owned by ``user_id`` or raise an error."""

    application = ApplicationRepository(store).get(application_id)
    if application is None:
        raise NotFoundError("Application not found")
    if application.user_id != user_id:
        raise PermissionDeniedError("Forbidden")
    return application
