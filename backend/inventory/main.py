"""Inventory API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"error": "<message>"}
    - CORS configured from settings (any origin by default)
    - Startup order: logging → pool → connectivity check → schema → serve

Design Decisions:
    - Connectivity failure is fatal: logged, then the process waits
      startup_exit_delay_seconds before the error propagates and uvicorn exits
    - Schema creation failure is logged only; the server still starts
"""

import asyncio
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from inventory.api.error_handlers import register_error_handlers
from inventory.api.routes import (
    computers, health, landing, maintenance, stats, users,
)
from inventory.config import get_settings
from inventory.infrastructure.database import DatabaseSessionManager
from inventory.infrastructure.observability import setup_logging
from inventory.infrastructure.schema import init_schema

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("--- System startup ---")

    db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        ssl_enabled=settings.use_ssl,
    )
    try:
        await db.check_connection()
    except Exception as e:
        logger.critical(f"Fatal startup error: {e}", exc_info=True)
        await db.dispose()
        await asyncio.sleep(settings.startup_exit_delay_seconds)
        raise
    logger.info("Connected to database")

    await init_schema(db)
    logger.info("Schema check complete")

    app.state.db_manager = db
    logger.info("Inventory API is live")
    yield
    logger.info("Inventory API shutting down")
    await db.dispose()


app = FastAPI(
    title="Asset Inventory API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(computers.router)
app.include_router(maintenance.router)
app.include_router(stats.router)
app.include_router(landing.router)

# Mounted after the API routes so /api/* and / take precedence
if os.path.isdir(settings.static_dir):
    app.mount("/", StaticFiles(directory=settings.static_dir), name="static")
