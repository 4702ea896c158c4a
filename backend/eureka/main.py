"""Eureka API — application assembly.

Invariants:
    - Every router is included explicitly below; nothing is auto-discovered
    - Error handlers are installed before the first request can arrive
    - The database manager exists only between lifespan startup and shutdown

Design Decisions:
    - Lifespan context manager (not on_event hooks) owns logging setup and the engine
    - database_auto_create is for local runs; deployed schemas come from alembic
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eureka.api.error_handlers import register_error_handlers
from eureka.api.routes import (
    answers, auth, comments, health, questions, themes, users,
)
from eureka.config import get_settings
from eureka.infrastructure.database import init_db
from eureka.infrastructure.observability import setup_logging

API_VERSION = "1.0.0"

ROUTERS = (
    health.router,
    auth.router,
    users.router,
    themes.router,
    questions.router,
    answers.router,
    comments.router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await manager.create_schema()
    logger.info(f"Eureka API {API_VERSION} ready")
    try:
        yield
    finally:
        await manager.close()
        logger.info("Eureka API stopped")


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title="Eureka API", version=API_VERSION, lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(application)
    for router in ROUTERS:
        application.include_router(router)
    return application


app = create_app()
