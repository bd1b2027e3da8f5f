import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from vehicle_listings.config import Settings
from vehicle_listings.domain.errors import SeedError
from vehicle_listings.entrypoints.http.exception_handlers import register_exception_handlers
from vehicle_listings.entrypoints.http.routes.health import router as health_router
from vehicle_listings.entrypoints.http.routes.vehicles import router as vehicles_router
from vehicle_listings.infra.db.models import Base
from vehicle_listings.infra.db.seed import seed_vehicles
from vehicle_listings.infra.db.session import build_engine, build_session_factory

logger = logging.getLogger(__name__)


def prepare_store(
    engine: Engine, session_factory: sessionmaker[Session], settings: Settings
) -> None:
    """
    Create the vehicles table if absent, then seed it when empty.

    A failing seed is logged and swallowed: the API still starts, it just
    serves an empty (or unchanged) store.
    """
    Base.metadata.create_all(engine)

    if not settings.seed_on_startup:
        logger.info("Seeding disabled, skipping")
        return

    try:
        seed_vehicles(session_factory, fixture_path=settings.seed_file)
    except SeedError as exc:
        logger.warning("Failed to seed database: %s", exc, exc_info=exc.__cause__ or exc)


def build_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """
    Build the API application.

    The engine and session factory are created here, once, and stored on
    ``app.state`` for the request dependencies. Pass ``engine`` to run
    against an existing engine (tests use in-memory SQLite).
    """
    settings = settings or Settings.from_env()
    owns_engine = engine is None
    engine = engine or build_engine(settings.database_url)
    session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        prepare_store(engine, session_factory, settings)
        yield
        if owns_engine:
            engine.dispose()

    app = FastAPI(
        title="Vehicle Listings API",
        description="""
        Read-only API for vehicle listings with pagination and filtering.

        ## Features
        - Paginated vehicle list with make/model/price/year filters
        - Lookup by internal id or registration mark (VRM)
        - Distinct makes and models

        ## Authentication
        None; every endpoint is public and read-only.

        ## Error Handling
        All errors return `{"error": "<message>"}` with status 400, 404 or 500.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
        expose_headers=["Content-Length"],
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(vehicles_router)

    return app
