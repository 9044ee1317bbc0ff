"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sonic.application.usecase.admin import SeedAdminUseCase
from sonic.config import Settings
from sonic.interface.api.errors import register_error_handlers
from sonic.interface.api.routes import (
    admin,
    auth,
    campaigns,
    comments,
    health,
    posts,
    users,
)
from sonic.util.di.container import create_container, setup_di
from sonic.util.observability import instrument_fastapi


async def seed_admin(container: AsyncContainer) -> None:
    """Run the admin bootstrap in its own request scope (one transaction)."""
    async with container() as request_container:
        use_case = await request_container.get(SeedAdminUseCase)
        outcome = await use_case.execute()
    logfire.info("Admin seed finished", outcome=outcome.value)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Seed the admin account on startup and release the container on shutdown."""
    container: AsyncContainer = app.state.dishka_container
    await seed_admin(container)
    yield
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title=settings.api.title,
        description="Backend API for Sonic - a community for sharing experiences, ideas, guides and campaigns",
        version=settings.api.version,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.frontend_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
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
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance, settings)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(campaigns.router)
    app_instance.include_router(users.router)
    app_instance.include_router(admin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
