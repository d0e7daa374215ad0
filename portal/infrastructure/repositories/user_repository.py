"""Persistence layer for user data."""

from __future__ import annotations

from typing import Any

from portal.domain.entities import User
from portal.infrastructure.store import EntityKind, EntityStore


class UserRepository:
    """Provide lookup and write operations for user entities."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def get(self, user_id: int) -> User | None:
        return self.store.get(EntityKind.USER, user_id)

    def get_by_username(self, username: str) -> User | None:
        return self._find(username=username)

    def get_by_nik(self, nik: str) -> User | None:
        return self._find(nik=nik)

    def create(self, user: User) -> User:
        return self.store.insert(EntityKind.USER, user)

    def update(self, user_id: int, **changes: Any) -> User:
        return self.store.update(EntityKind.USER, user_id, changes)

    def _find(self, **filters: Any) -> User | None:
        matches = self.store.scan(
            EntityKind.USER,
            lambda user: all(getattr(user, key) == value for key, value in filters.items()),
        )
        return matches[0] if matches else None


__all__ = ["UserRepository"]
