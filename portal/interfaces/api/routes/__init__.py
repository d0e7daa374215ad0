from fastapi import FastAPI

from .applications import router as applications_router
from .auth import router as auth_router
from .health import router as health_router
from .notifications import router as notifications_router
from .services import router as services_router
from .users import router as users_router

API_PREFIX = "/api"


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(auth_router, prefix=API_PREFIX)
    app.include_router(users_router, prefix=API_PREFIX)
    app.include_router(services_router, prefix=API_PREFIX)
    app.include_router(applications_router, prefix=API_PREFIX)
    app.include_router(notifications_router, prefix=API_PREFIX)
