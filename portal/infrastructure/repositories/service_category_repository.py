"""Persistence helpers for service categories."""

from __future__ import annotations

from portal.domain.entities import ServiceCategory
from portal.infrastructure.store import EntityKind, EntityStore


class ServiceCategoryRepository:
    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def list(self) -> list[ServiceCategory]:
        return self.store.scan(EntityKind.SERVICE_CATEGORY)

    def get(self, category_id: int) -> ServiceCategory | None:
        return self.store.get(EntityKind.SERVICE_CATEGORY, category_id)

    def create(self, category: ServiceCategory) -> ServiceCategory:
        return self.store.insert(EntityKind.SERVICE_CATEGORY, category)


__all__ = ["ServiceCategoryRepository"]
