"""API routers."""

from jobflow.routers.applications import router as applications_router
from jobflow.routers.job_urls import router as job_urls_router
from jobflow.routers.preferences import router as preferences_router
from jobflow.routers.stats import router as stats_router
from jobflow.routers.uploads import router as uploads_router

__all__ = [
    "applications_router",
    "job_urls_router",
    "preferences_router",
    "stats_router",
    "uploads_router",
]
