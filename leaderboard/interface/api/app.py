"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from leaderboard.config import Settings
from leaderboard.interface.api.errors import register_error_handlers
from leaderboard.interface.api.routes import health, points, users
from leaderboard.util.di.container import create_container, setup_di
from leaderboard.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function. In
    production, start_app.py handles this; tests configure it in conftest.py.

    Args:
        container: DI container to use (None builds the production container)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Leaderboard API",
        description="Users claim random points for each other and climb a ranked leaderboard",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(points.router)

    return app_instance
