"""
Main FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from coordparse import __version__
from coordparse.api.coordinates import router as coordinates_router
from coordparse.api.error_handlers import register_error_handlers
from coordparse.api.middleware import RequestCorrelationMiddleware
from coordparse.core.config import settings
from coordparse.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Lifespan context manager for FastAPI application.

    Configures logging on startup from the environment settings.
    """
    setup_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        enable_console=True,
    )
    logger.info(f"Starting coordparse API v{__version__} in {settings.environment} mode")

    yield

    logger.info("Shutting down coordparse API")


app = FastAPI(
    title="coordparse API",
    description="Recognize, reproject and format coordinates typed as free text",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestCorrelationMiddleware)

register_error_handlers(app)

app.include_router(coordinates_router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root() -> dict[str, str]:
    """
    Root endpoint returning API information.

    Returns:
        dict[str, str]: API information including name and version.
    """
    return {
        "name": "coordparse API",
        "version": __version__,
        "description": "Coordinate recognition and formatting",
    }


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
