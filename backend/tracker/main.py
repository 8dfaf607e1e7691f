"""Tracker API — FastAPI application entry point.

Invariants:
    - Routers registered explicitly, one per entity family plus health
    - Logging configured and the database manager created in the lifespan,
      disposed on shutdown
    - CORS origins come from settings
    - Every request is tagged with a request id before any handler logs

Design Decisions:
    - create_app() factory; module-level `app` for uvicorn (tracker.main:app)
    - Error handlers live in api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tracker.api.error_handlers import register_error_handlers
from tracker.api.middleware import REQUEST_ID_HEADER, RequestIdMiddleware
from tracker.api.routes import health, projects, tasks, teams, users
from tracker.config import Settings, get_settings
from tracker.infrastructure import database
from tracker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

ROUTERS = (
    health.router, users.router, projects.router, teams.router, tasks.router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.database_echo)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    logger.info(f"{settings.app_name} {settings.app_version} started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info(f"{settings.app_name} shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name, version=settings.app_version, lifespan=lifespan,
    )
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    for router in ROUTERS:
        app.include_router(router)
    register_error_handlers(app)
    return app


app = create_app()
