"""FastAPI application."""

from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from peerskill.config import Settings
from peerskill.interface.api.errors import register_error_handlers
from peerskill.interface.api.routes import (
    admin,
    auth,
    health,
    notifications,
    peers,
    ratings,
    requests,
    sessions,
    users,
)
from peerskill.persistence.probe import StoreProbe
from peerskill.util.di.container import create_container, setup_di
from peerskill.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Check the store on startup and close the container on shutdown.

    An unreachable store is logged and the app starts anyway.
    """
    container: AsyncContainer = app.state.dishka_container
    probe = await container.get(StoreProbe)
    try:
        await probe.ping()
        logfire.info("Store reachable")
    except (SQLAlchemyError, OSError) as e:
        logfire.error(
            "Store unreachable at startup",
            error=str(e),
            error_type=type(e).__name__,
        )
    yield
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container to use; defaults to the production container
    """
    settings = Settings()

    app_instance = FastAPI(
        title="PeerSkill API",
        description="Backend API for PeerSkill - peer-to-peer skill exchange for students",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(users.router)
    app_instance.include_router(peers.router)
    app_instance.include_router(ratings.router)
    app_instance.include_router(requests.router)
    app_instance.include_router(sessions.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(admin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
