"""Endpoints for logging in and out."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from portal.application.use_cases.users import AuthenticationStatus, authenticate_user
from portal.domain.entities import User
from portal.infrastructure.security import TokenDenylist, create_access_token
from portal.infrastructure.store import EntityStore
from portal.interfaces.api.dependencies import (
    get_current_user,
    get_store,
    get_token_denylist,
    oauth2_scheme,
    resolve_token_claims,
)
from portal.interfaces.api.schemas import LoginRequest, MessageResponse, Token, UserRead

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/login", response_model=Token)
def login(payload: LoginRequest, store: EntityStore = Depends(get_store)):
    """Authenticate by username and password and return a bearer token."""

    user, auth_status = authenticate_user(store, payload.username, payload.password)

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(data={"sub": str(user.id)})
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "user": UserRead.model_validate(user),
    }


@router.post("/logout", response_model=MessageResponse)
def logout(
    token: str = Depends(oauth2_scheme),
    denylist: TokenDenylist = Depends(get_token_denylist),
):
    """Revoke the presented token."""

    claims = resolve_token_claims(token, denylist)
    denylist.revoke(claims["jti"])
    logger.info("User %s logged out", claims.get("sub"))
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)):
    """Return the authenticated user."""

    return UserRead.model_validate(current_user)
