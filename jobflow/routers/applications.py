"""API routes for tracked job applications."""

import logging

from fastapi import APIRouter, Depends

from jobflow.core.auth import get_current_user_id
from jobflow.core.exceptions import (
    StorageError,
    not_found_exception,
    server_error_exception,
)
from jobflow.schemas import (
    ApplicationCreate,
    ApplicationRequest,
    ApplicationResponse,
    ApplicationUpdateRequest,
)
from jobflow.storage import Storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/applications", tags=["applications"])


@router.get("", response_model=list[ApplicationResponse])
async def list_applications(
    user_id: str = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage),
):
    """List the current user's applications, oldest first."""
    try:
        return await storage.get_applications(user_id)
    except StorageError as e:
        logger.error(f"Failed to fetch applications for {user_id}: {e}")
        raise server_error_exception("Failed to fetch applications")


@router.post("", response_model=ApplicationResponse)
async def create_application(
    request: ApplicationRequest,
    user_id: str = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage),
):
    """Record a new application for the current user."""
    data = ApplicationCreate(**request.model_dump(), user_id=user_id)
    try:
        application = await storage.create_application(data)
    except StorageError as e:
        logger.error(f"Failed to create application for {user_id}: {e}")
        raise server_error_exception("Failed to create application")

    logger.info(
        f"Application {application.id} created for user {user_id}: "
        f"{application.position} at {application.company}"
    )
    return application


@router.patch("/{application_id}", response_model=ApplicationResponse)
async def update_application(
    application_id: int,
    request: ApplicationUpdateRequest,
    user_id: str = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage),
):
    """Apply a partial update to an application."""
    try:
        updated = await storage.update_application(application_id, request)
    except StorageError as e:
        logger.error(f"Failed to update application {application_id}: {e}")
        raise server_error_exception("Failed to update application")

    if updated is None:
        raise not_found_exception("Application not found")

    logger.info(f"Application {application_id} updated by user {user_id}")
    return updated


@router.delete("/{application_id}")
async def delete_application(
    application_id: int,
    user_id: str = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage),
):
    """Delete an application."""
    try:
        deleted = await storage.delete_application(application_id)
    except StorageError as e:
        logger.error(f"Failed to delete application {application_id}: {e}")
        raise server_error_exception("Failed to delete application")

    if not deleted:
        raise not_found_exception("Application not found")
    logger.info(f"Application {application_id} deleted by user {user_id}")
    return {"message": "Application deleted successfully"}
