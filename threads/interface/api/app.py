"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from threads.config import Settings
from threads.interface.api.routes import (
    auth,
    communities,
    health,
    navigation,
    threads,
    users,
)
from threads.interface.api.routes.navigation import APP_DESCRIPTION, APP_TITLE
from threads.util.di.container import create_container, setup_di
from threads.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (tests pass one built from mocks).
            Defaults to the production container.
    """
    settings = Settings()

    app_instance = FastAPI(
        title=APP_TITLE,
        description=APP_DESCRIPTION,
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(navigation.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(threads.router)
    app_instance.include_router(users.router)
    app_instance.include_router(communities.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
