"""Routes for registering users and editing their profile."""

from fastapi import APIRouter, Depends, status

from portal.application.use_cases.users import (
    create_user as create_user_uc,
    update_language as update_language_uc,
    update_user as update_user_uc,
)
from portal.domain.entities import User
from portal.domain.errors import PortalError
from portal.infrastructure.store import EntityStore
from portal.interfaces.api.dependencies import get_current_user, get_store
from portal.interfaces.api.routes_helpers import to_http_exception
from portal.interfaces.api.schemas import LanguageUpdate, UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, store: EntityStore = Depends(get_store)):
    """Register a new citizen account."""

    try:
        user = create_user_uc(store, **user_in.model_dump())
    except PortalError as exc:
        raise to_http_exception(exc) from exc
    return UserRead.model_validate(user)


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    user_in: UserUpdate,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """Update the authenticated user's own profile."""

    try:
        user = update_user_uc(
            store,
            user_id=user_id,
            acting_user_id=current_user.id,
            changes=user_in.model_dump(exclude_unset=True),
        )
    except PortalError as exc:
        raise to_http_exception(exc) from exc
    return UserRead.model_validate(user)


@router.put("/{user_id}/language", response_model=UserRead)
def update_language(
    user_id: int,
    payload: LanguageUpdate,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    """Change the preferred language (``id`` or ``en``) of the authenticated user."""

    try:
        user = update_language_uc(
            store,
            user_id=user_id,
            acting_user_id=current_user.id,
            language=payload.language,
        )
    except PortalError as exc:
        raise to_http_exception(exc) from exc
    return UserRead.model_validate(user)
