"""API routes for user preferences."""

import logging

from fastapi import APIRouter, Depends

from jobflow.core.auth import get_current_user_id
from jobflow.core.exceptions import StorageError, server_error_exception
from jobflow.schemas import (
    UserPreferencesCreate,
    UserPreferencesRequest,
    UserPreferencesResponse,
)
from jobflow.schemas.preferences import EMPTY_PREFERENCES
from jobflow.storage import Storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user-preferences", tags=["preferences"])


@router.get("", response_model=UserPreferencesResponse | dict[str, str])
async def get_user_preferences(
    user_id: str = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage),
):
    """Get the current user's preferences, or empty defaults."""
    try:
        preferences = await storage.get_user_preferences(user_id)
    except StorageError as e:
        logger.error(f"Failed to fetch preferences for {user_id}: {e}")
        raise server_error_exception("Failed to fetch user preferences")
    return preferences or EMPTY_PREFERENCES


@router.post("", response_model=UserPreferencesResponse)
async def save_user_preferences(
    request: UserPreferencesRequest,
    user_id: str = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage),
):
    """Create or update the current user's preferences."""
    data = UserPreferencesCreate(**request.model_dump(), user_id=user_id)
    try:
        preferences = await storage.create_or_update_user_preferences(data)
    except StorageError as e:
        logger.error(f"Failed to save preferences for {user_id}: {e}")
        raise server_error_exception("Failed to save user preferences")

    logger.info(f"Preferences saved for user {user_id}")
    return preferences
