"""Routes for submitting and tracking the caller's applications."""

from fastapi import APIRouter, Depends, status

from portal.application.use_cases.applications import (
    get_user_application,
    list_user_applications,
    submit_application,
)
from portal.domain.entities import User
from portal.domain.errors import PortalError
from portal.infrastructure.store import EntityStore
from portal.interfaces.api.dependencies import get_current_user, get_store
from portal.interfaces.api.routes_helpers import to_http_exception
from portal.interfaces.api.schemas import ApplicationCreate, ApplicationRead

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("", response_model=list[ApplicationRead])
def read_applications(
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """Return the applications filed by the authenticated user."""

    return [
        ApplicationRead.model_validate(application)
        for application in list_user_applications(store, current_user.id)
    ]


@router.get("/{application_id}", response_model=ApplicationRead)
def read_application(
    application_id: int,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    try:
        application = get_user_application(
            store, application_id=application_id, user_id=current_user.id
        )
    except PortalError as exc:
        raise to_http_exception(exc) from exc
    return ApplicationRead.model_validate(application)


@router.post("", response_model=ApplicationRead, status_code=status.HTTP_201_CREATED)
def create_application(
    payload: ApplicationCreate,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """Submit an application; the caller receives a confirmation notification."""

    try:
        application = submit_application(
            store,
            user_id=current_user.id,
            service_id=payload.service_id,
            form_data=payload.form_data,
            status=payload.status,
        )
    except PortalError as exc:
        raise to_http_exception(exc) from exc
    return ApplicationRead.model_validate(application)
