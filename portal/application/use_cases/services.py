"""Use cases for browsing the service catalog."""

from portal.domain.entities import Service, ServiceCategory
from portal.domain.errors import NotFoundError
from portal.infrastructure.repositories import ServiceCategoryRepository, ServiceRepository
from portal.infrastructure.store import EntityStore


def list_services(store: EntityStore) -> list[Service]:
    return ServiceRepository(store).list()


def list_featured_services(store: EntityStore) -> list[Service]:
    return ServiceRepository(store).list_featured()


def list_services_by_category(store: EntityStore, category: str) -> list[Service]:
    """Return services whose category name matches ``category`` exactly."""

    return ServiceRepository(store).list_by_category(category)


def get_service(store: EntityStore, service_id: int) -> Service:
    """Return the service identified by ``service_id`` or raise an error."""

    service = ServiceRepository(store).get(service_id)
    if service is None:
        raise NotFoundError("Service not found")
    return service


def list_service_categories(store: EntityStore) -> list[ServiceCategory]:
    return ServiceCategoryRepository(store).list()


def get_service_category(store: EntityStore, category_id: int) -> ServiceCategory:
    category = ServiceCategoryRepository(store).get(category_id)
    if category is None:
        raise NotFoundError("Service category not found")
    return category


__all__ = [
    "list_services",
    "list_featured_services",
    "list_services_by_category",
    "get_service",
    "list_service_categories",
    "get_service_category",
]
