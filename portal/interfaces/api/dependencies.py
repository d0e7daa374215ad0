"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from portal.domain.entities import User
from portal.infrastructure.repositories import UserRepository
from portal.infrastructure.security import TokenDenylist, decode_access_token
from portal.infrastructure.store import EntityStore

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login")


def _credentials_error(detail: str = "Not authenticated") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_store(request: Request) -> EntityStore:
    """Return the store created for this application instance."""

    return request.app.state.store


def get_token_denylist(request: Request) -> TokenDenylist:
    return request.app.state.token_denylist


def resolve_token_claims(token: str, denylist: TokenDenylist) -> dict:
    """Decode ``token`` and reject it when it has been revoked."""

    try:
        claims = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_error() from exc

    token_id = claims.get("jti")
    if not isinstance(token_id, str) or denylist.is_revoked(token_id):
        raise _credentials_error()
    return claims


def resolve_current_user(token: str, store: EntityStore, denylist: TokenDenylist) -> User:
    """Resolve the authenticated user for the provided token."""

    claims = resolve_token_claims(token, denylist)
    try:
        user_id = int(claims.get("sub"))
    except (TypeError, ValueError) as exc:
        raise _credentials_error() from exc

    user = UserRepository(store).get(user_id)
    if user is None:
        raise _credentials_error("User not found")
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    store: EntityStore = Depends(get_store),
    denylist: TokenDenylist = Depends(get_token_denylist),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, store, denylist)
