"""API routes for resume uploads."""

import logging

from fastapi import APIRouter, Depends, File, UploadFile
from starlette.concurrency import run_in_threadpool

from jobflow.core.auth import get_current_user_id
from jobflow.core.exceptions import (
    ObjectStorageError,
    bad_request_exception,
    not_found_exception,
    server_error_exception,
)
from jobflow.schemas import (
    PresignedUploadRequest,
    PresignedUploadResponse,
    ResumeUploadResponse,
)
from jobflow.services.resume_storage import ResumeStorage, get_resume_storage
from jobflow.utils.validators import validate_resume_key

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["uploads"])


@router.post("/upload-resume", response_model=ResumeUploadResponse)
async def upload_resume(
    resume: UploadFile | None = File(None),
    user_id: str = Depends(get_current_user_id),
    resume_storage: ResumeStorage = Depends(get_resume_storage),
):
    """Upload a resume file to object storage."""
    if resume is None or not resume.filename:
        raise bad_request_exception("No file uploaded")

    key = resume_storage.generate_resume_key(user_id, resume.filename)
    content_type = resume.content_type or "application/octet-stream"
    data = await resume.read()
    try:
        url = await run_in_threadpool(
            resume_storage.upload_file, data, key, content_type
        )
    except ObjectStorageError as e:
        logger.error(f"Error uploading resume for {user_id}: {e}")
        raise server_error_exception("Failed to upload resume")

    return ResumeUploadResponse(url=url, key=key)


@router.post("/resume-upload-url", response_model=PresignedUploadResponse)
async def create_resume_upload_url(
    request: PresignedUploadRequest,
    user_id: str = Depends(get_current_user_id),
    resume_storage: ResumeStorage = Depends(get_resume_storage),
):
    """Issue a presigned URL for uploading a resume directly to the bucket."""
    key = resume_storage.generate_resume_key(user_id, request.filename)
    try:
        upload_url = await run_in_threadpool(
            resume_storage.get_presigned_upload_url, key, request.content_type
        )
    except ObjectStorageError as e:
        logger.error(f"Error presigning resume upload for {user_id}: {e}")
        raise server_error_exception("Failed to create upload URL")

    return PresignedUploadResponse(
        url=resume_storage.public_url_for(key),
        key=key,
        upload_url=upload_url,
        expires_in=resume_storage.presigned_expiry,
    )


@router.delete("/upload-resume/{key:path}")
async def delete_resume(
    key: str,
    user_id: str = Depends(get_current_user_id),
    resume_storage: ResumeStorage = Depends(get_resume_storage),
):
    """Delete one of the current user's uploaded resumes."""
    validation = validate_resume_key(key, user_id)
    if not validation.is_valid:
        raise not_found_exception(validation.error)

    try:
        await run_in_threadpool(resume_storage.delete_file, key)
    except ObjectStorageError as e:
        logger.error(f"Error deleting resume {key}: {e}")
        raise server_error_exception("Failed to delete resume")

    return {"message": "Resume deleted successfully"}
