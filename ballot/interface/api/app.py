"""FastAPI application factory."""

from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ballot.config import Settings
from ballot.interface.api.errors import register_error_handlers
from ballot.interface.api.routes import admin, auth, comments, health, polls, users
from ballot.util.di.container import create_container, setup_di
from ballot.util.observability import SERVICE_VERSION, instrument_fastapi

ROUTERS = (
    health.router,
    auth.router,
    users.router,
    polls.router,
    comments.router,
    admin.router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close whichever container is attached when the server stops."""
    yield
    # Disposes the engine and pool opened by the persistence component
    await app.state.dishka_container.close()
    logfire.info("API shut down")


def add_cors(app: FastAPI, settings: Settings) -> None:
    """Allow the frontend to call the API with its session cookie."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )


def create_app() -> FastAPI:
    """Build the API with the production container attached.

    Logfire must already be configured (``scripts/start_app.py`` in
    production, ``tests/conftest.py`` in tests). Tests replace the container
    with ``setup_di(app, build_test_container())``.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Ballot API",
        description="Polls, votes and threaded comment discussion",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )
    instrument_fastapi(app_instance)
    add_cors(app_instance, settings)

    setup_di(app_instance, create_container())
    register_error_handlers(app_instance)

    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance


# Imported by uvicorn as ballot.interface.api.app:app
app = create_app()
