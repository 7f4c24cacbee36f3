"""JobFlow - job application tracking API."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobflow.core.exceptions import register_exception_handlers
from jobflow.routers import (
    applications_router,
    job_urls_router,
    preferences_router,
    stats_router,
    uploads_router,
)
from jobflow.storage import Storage, close_storage, get_storage

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Initializing application...")
    storage = get_storage()
    await storage.init()
    logger.info(f"Application initialized with {storage.name} storage")

    yield

    logger.info("Shutting down...")
    await close_storage()
    logger.info("Shutdown complete")


app = FastAPI(
    title="JobFlow",
    description="Job application tracking API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(preferences_router)
app.include_router(uploads_router)
app.include_router(job_urls_router)
app.include_router(applications_router)
app.include_router(stats_router)


@app.get("/health")
async def health_check(storage: Storage = Depends(get_storage)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "jobflow",
        "storage": storage.name,
    }
