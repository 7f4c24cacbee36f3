"""API routes for dashboard statistics and the current user."""

import logging

from fastapi import APIRouter, Depends

from jobflow.core.auth import get_current_user, get_current_user_id
from jobflow.core.exceptions import StorageError, server_error_exception
from jobflow.schemas import StatsResponse, UserResponse
from jobflow.storage import Storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["stats"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    user_id: str = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage),
):
    """Aggregate counts over the current user's applications and job URLs."""
    try:
        return await storage.get_stats(user_id)
    except StorageError as e:
        logger.error(f"Failed to compute stats for {user_id}: {e}")
        raise server_error_exception("Failed to fetch stats")


@router.get("/user", response_model=UserResponse)
async def get_user(user: UserResponse = Depends(get_current_user)):
    """Return the acting user."""
    return user
