"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from stay_sphere.api.auth import router as auth_router
from stay_sphere.api.bookings import router as bookings_router
from stay_sphere.api.errors import register_exception_handlers
from stay_sphere.api.reviews import router as reviews_router
from stay_sphere.api.rooms import router as rooms_router
from stay_sphere.app_logging import configure_logging
from stay_sphere.config import parse_cors_origins
from stay_sphere.containers import AppContainer

ROUTERS = (auth_router, rooms_router, bookings_router, reviews_router)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            await app.state.container.store.ping()
            logger.info("Pinged the document store, connection is healthy")
        except Exception:
            logger.exception("Failed to reach the document store at startup")
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Stay Sphere", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    for router in ROUTERS:
        app.include_router(router)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Liveness text response."""
        return "Stay Sphere site server is running"

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
