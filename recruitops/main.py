"""
Main FastAPI application.

This is the entry point for the API server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from recruitops.core.config import settings
from recruitops.db.session import engine
from recruitops.errors import AppError, app_error_handler
from recruitops.routers import (
    candidates,
    cv_mapping,
    dashboard,
    health,
    jobs,
    screening,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI app.

    Logs startup and disposes of the connection pool on shutdown.
    """
    logger.info("Starting %s...", settings.APP_NAME)

    yield

    logger.info("Shutting down %s...", settings.APP_NAME)
    await engine.dispose()


# Create the FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Backend API for the recruiting operations console",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_exception_handler(AppError, app_error_handler)

# Include routers (API endpoints)
app.include_router(health.router, tags=["Health"])
app.include_router(jobs.router)
app.include_router(candidates.router)
app.include_router(cv_mapping.router)
app.include_router(screening.router)
app.include_router(dashboard.router)
