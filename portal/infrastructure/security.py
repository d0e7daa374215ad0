"""Security helpers for hashing and token generation."""

from __future__ import annotations

import secrets
import threading
from datetime import datetime, timedelta, timezone
from functools import lru_cache

from jose import JWTError, jwt
from passlib.context import CryptContext

from portal.config import get_settings

_ALGORITHM = "HS256"


@lru_cache(maxsize=4)
def _password_context(rounds: int) -> CryptContext:
    return CryptContext(
        schemes=["pbkdf2_sha256"],
        deprecated="auto",
        pbkdf2_sha256__rounds=rounds,
    )


def _context() -> CryptContext:
    return _password_context(get_settings().password_hash_rounds)


def get_password_hash(password: str) -> str:
    return _context().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return _context().verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a recognised hash.
        return False


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    claims = {**data, "exp": expire, "jti": secrets.token_hex(16)}
    return jwt.encode(claims, settings.secret_key, algorithm=_ALGORITHM)


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, get_settings().secret_key, algorithms=[_ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


class TokenDenylist:
    """Token identifiers revoked by logout for the lifetime of the process."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._revoked: set[str] = set()

    def revoke(self, token_id: str) -> None:
        with self._lock:
            self._revoked.add(token_id)

    def is_revoked(self, token_id: str) -> bool:
        with self._lock:
            return token_id in self._revoked


__all__ = [
    "TokenDenylist",
    "create_access_token",
    "decode_access_token",
    "get_password_hash",
    "verify_password",
]
