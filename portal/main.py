"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portal.config import get_settings
from portal.infrastructure.security import TokenDenylist
from portal.infrastructure.seed import seed_sample_data
from portal.infrastructure.store import EntityStore
from portal.interfaces.api.routes import register_routes
from portal.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed the in-memory store on startup when enabled."""

    if get_settings().seed_sample_data:
        seed_sample_data(app.state.store)
    yield
    logger.info("Shutting down; in-memory data is discarded")


def create_app(store: EntityStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Every application instance owns its store; pass ``store`` to share a
    prepared one (tests do this).
    """

    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Portal Layanan Publik API", lifespan=lifespan)
    app.state.store = store if store is not None else EntityStore()
    app.state.token_denylist = TokenDenylist()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app
