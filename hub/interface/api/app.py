"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hub.config import Settings
from hub.interface.api.routes import auth, games, health, linked_accounts, session
from hub.interface.error import register_exception_handlers
from hub.util.di.container import create_container, setup_di
from hub.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; tests pass one with fake upstreams

    Returns:
        Configured application
    """
    settings = Settings()

    # Instrument httpx for outbound calls to Steam and Epic
    instrument_httpx()

    app_instance = FastAPI(
        title="Game Library Hub API",
        description="Links Steam, Epic Games and other platform accounts and serves one merged game library",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # The frontend calls the session completion and library endpoints
    # with credentials, so origins must be explicit.
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(session.router)
    app_instance.include_router(games.router)
    app_instance.include_router(linked_accounts.router)
    # Provider routes last: /api/{provider}/... must not shadow fixed paths
    app_instance.include_router(auth.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
