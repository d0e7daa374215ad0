"""Persistence helpers for catalog services."""

from __future__ import annotations

from portal.domain.entities import Service
from portal.infrastructure.store import EntityKind, EntityStore


class ServiceRepository:
    """Read and create :class:`Service` catalog entries."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def list(self) -> list[Service]:
        return self.store.scan(EntityKind.SERVICE)

    def get(self, service_id: int) -> Service | None:
        return self.store.get(EntityKind.SERVICE, service_id)

    def list_by_category(self, category: str) -> list[Service]:
        """Return services whose category name equals ``category`` exactly."""

        return self.store.scan(EntityKind.SERVICE, lambda service: service.category == category)

    def list_featured(self) -> list[Service]:
        return self.store.scan(EntityKind.SERVICE, lambda service: service.featured is True)

    def create(self, service: Service) -> Service:
        return self.store.insert(EntityKind.SERVICE, service)


__all__ = ["ServiceRepository"]
