"""Lantern API - URL Quality Inspection Engine."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import analysis_router, blocklist_router, health_router, live_router
from config import settings
from logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Code before `yield` runs on startup.
    Code after `yield` runs on shutdown.
    """
    setup_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name}...")
    yield
    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title="Lantern API",
    description="URL inspection engine for security, performance, SEO, accessibility and best-practice scoring.",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS so browser widgets can call the API directly
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router, prefix="/api/v1")
app.include_router(analysis_router, prefix="/api/v1")
app.include_router(blocklist_router, prefix="/api/v1")
app.include_router(live_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root():
    """Describe the service entry points."""
    return {
        "service": "Lantern API",
        "docs": "/docs",
        "health": "/api/v1/health",
        "analyze": "/api/v1/analyze",
    }
