"""BizTime API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BizTimeError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Run with: uvicorn biztime.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from biztime.api.error_handlers import register_error_handlers
from biztime.api.routes import companies, health, industries, invoices
from biztime.config import get_settings
from biztime.infrastructure.database import close_db, init_db
from biztime.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    logger.info("BizTime API started")
    yield
    await close_db()
    logger.info("BizTime API shutting down")


settings = get_settings()
app = FastAPI(
    title="BizTime API", version=settings.service_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes - explicit registration
app.include_router(health.router)
app.include_router(companies.router)
app.include_router(industries.router)
app.include_router(invoices.router)

register_error_handlers(app)
