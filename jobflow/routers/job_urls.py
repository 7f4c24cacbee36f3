"""API routes for submitted job URLs."""

import logging

from fastapi import APIRouter, Depends

from jobflow.core.auth import get_current_user_id
from jobflow.core.exceptions import (
    StorageError,
    bad_request_exception,
    not_found_exception,
    server_error_exception,
)
from jobflow.schemas import (
    JobUrlCreate,
    JobUrlRequest,
    JobUrlResponse,
    JobUrlStatusRequest,
)
from jobflow.storage import Storage, get_storage
from jobflow.utils.validators import validate_job_url_status

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/job-urls", tags=["job-urls"])


@router.get("", response_model=list[JobUrlResponse])
async def list_job_urls(
    user_id: str = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage),
):
    """List the current user's job URLs, oldest first."""
    try:
        return await storage.get_job_urls(user_id)
    except StorageError as e:
        logger.error(f"Failed to fetch job URLs for {user_id}: {e}")
        raise server_error_exception("Failed to fetch job URLs")


@router.post("", response_model=JobUrlResponse)
async def create_job_url(
    request: JobUrlRequest,
    user_id: str = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage),
):
    """Submit a job URL for the current user."""
    data = JobUrlCreate(**request.model_dump(), user_id=user_id)
    try:
        job_url = await storage.create_job_url(data)
    except StorageError as e:
        logger.error(f"Failed to create job URL for {user_id}: {e}")
        raise server_error_exception("Failed to create job URL")

    logger.info(f"Job URL {job_url.id} added for user {user_id}")
    return job_url


@router.patch("/{job_url_id}", response_model=JobUrlResponse)
async def update_job_url_status(
    job_url_id: int,
    request: JobUrlStatusRequest,
    user_id: str = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage),
):
    """Move a job URL to another status."""
    validation = validate_job_url_status(request.status)
    if not validation.is_valid:
        raise bad_request_exception(validation.error)

    try:
        updated = await storage.update_job_url_status(job_url_id, request.status)
    except StorageError as e:
        logger.error(f"Failed to update job URL {job_url_id}: {e}")
        raise server_error_exception("Failed to update job URL")

    if updated is None:
        raise not_found_exception("Job URL not found")

    logger.info(f"Job URL {job_url_id} marked {request.status} by user {user_id}")
    return updated


@router.delete("/{job_url_id}")
async def delete_job_url(
    job_url_id: int,
    user_id: str = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage),
):
    """Delete a job URL."""
    try:
        deleted = await storage.delete_job_url(job_url_id)
    except StorageError as e:
        logger.error(f"Failed to delete job URL {job_url_id}: {e}")
        raise server_error_exception("Failed to delete job URL")

    if not deleted:
        raise not_found_exception("Job URL not found")
    logger.info(f"Job URL {job_url_id} deleted by user {user_id}")
    return {"message": "Job URL deleted successfully"}
