"""Pydantic schemas for request/response validation."""

from jobflow.schemas.application import (
    APPLICATION_STATUSES,
    ApplicationCreate,
    ApplicationRequest,
    ApplicationResponse,
    ApplicationUpdateRequest,
)
from jobflow.schemas.job_url import (
    JOB_URL_STATUSES,
    JobUrlCreate,
    JobUrlRequest,
    JobUrlResponse,
    JobUrlStatusRequest,
)
from jobflow.schemas.preferences import (
    UserPreferencesCreate,
    UserPreferencesRequest,
    UserPreferencesResponse,
)
from jobflow.schemas.stats import StatsResponse
from jobflow.schemas.upload import (
    PresignedUploadRequest,
    PresignedUploadResponse,
    ResumeUploadResponse,
)
from jobflow.schemas.user import SessionUser, UserResponse

__all__ = [
    "APPLICATION_STATUSES",
    "ApplicationCreate",
    "ApplicationRequest",
    "ApplicationResponse",
    "ApplicationUpdateRequest",
    "JOB_URL_STATUSES",
    "JobUrlCreate",
    "JobUrlRequest",
    "JobUrlResponse",
    "JobUrlStatusRequest",
    "PresignedUploadRequest",
    "PresignedUploadResponse",
    "ResumeUploadResponse",
    "SessionUser",
    "StatsResponse",
    "UserPreferencesCreate",
    "UserPreferencesRequest",
    "UserPreferencesResponse",
    "UserResponse",
]
