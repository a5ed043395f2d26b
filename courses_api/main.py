"""Course Catalog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Client errors rendered by handlers in api/error_handlers.py
    - Everything else caught by ErrorIsolationMiddleware (uniform 500)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - ErrorIsolationMiddleware added last so it wraps CORS as well
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from courses_api.api.error_handlers import register_error_handlers
from courses_api.api.error_isolation import ErrorIsolationMiddleware
from courses_api.infrastructure import database
from courses_api.infrastructure.observability import setup_logging
from courses_api.config import get_settings
from courses_api.api.routes import courses, health, root, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Course Catalog API started")
    yield
    if database.db_manager:
        await database.db_manager.close()
    logger.info("Course Catalog API shutting down")


app = FastAPI(
    title="Course Catalog API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(ErrorIsolationMiddleware)

app.include_router(root.router, prefix=settings.api_prefix)
app.include_router(users.router, prefix=settings.api_prefix)
app.include_router(courses.router, prefix=settings.api_prefix)
app.include_router(health.router, prefix=settings.api_prefix)

register_error_handlers(app)
