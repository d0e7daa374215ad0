"""Routes for browsing the service catalog."""

from fastapi import APIRouter, Depends

from portal.application.use_cases.services import (
    get_service,
    get_service_category,
    list_featured_services,
    list_service_categories,
    list_services,
    list_services_by_category,
)
from portal.domain.errors import PortalError
from portal.infrastructure.store import EntityStore
from portal.interfaces.api.dependencies import get_store
from portal.interfaces.api.routes_helpers import to_http_exception
from portal.interfaces.api.schemas import ServiceCategoryRead, ServiceRead

router = APIRouter(prefix="/services", tags=["services"])


@router.get("", response_model=list[ServiceRead])
def read_services(store: EntityStore = Depends(get_store)):
    return [ServiceRead.model_validate(service) for service in list_services(store)]


@router.get("/featured", response_model=list[ServiceRead])
def read_featured_services(store: EntityStore = Depends(get_store)):
    return [ServiceRead.model_validate(service) for service in list_featured_services(store)]


@router.get("/categories", response_model=list[ServiceCategoryRead])
def read_service_categories(store: EntityStore = Depends(get_store)):
    return [
        ServiceCategoryRead.model_validate(category)
        for category in list_service_categories(store)
    ]


@router.get("/categories/{category_id}", response_model=ServiceCategoryRead)
def read_service_category(category_id: int, store: EntityStore = Depends(get_store)):
    try:
        category = get_service_category(store, category_id)
    except PortalError as exc:
        raise to_http_exception(exc) from exc
    return ServiceCategoryRead.model_validate(category)


@router.get("/category/{category}", response_model=list[ServiceRead])
def read_services_by_category(category: str, store: EntityStore = Depends(get_store)):
    """Return services whose category name matches the path segment exactly."""

    return [
        ServiceRead.model_validate(service)
        for service in list_services_by_category(store, category)
    ]


@router.get("/{service_id}", response_model=ServiceRead)
def read_service(service_id: int, store: EntityStore = Depends(get_store)):
    try:
        service = get_service(store, service_id)
    except PortalError as exc:
        raise to_http_exception(exc) from exc
    return ServiceRead.model_validate(service)
