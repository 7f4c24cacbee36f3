"""Schemas for resume uploads."""

from pydantic import Field

from jobflow.schemas.base import CamelModel


class ResumeUploadResponse(CamelModel):
    """Location of an uploaded resume."""

    url: str
    key: str


class PresignedUploadRequest(CamelModel):
    """Request for a direct-to-bucket upload URL."""

    filename: str = Field(..., min_length=1)
    content_type: str = Field(default="application/pdf", min_length=1)


class PresignedUploadResponse(ResumeUploadResponse):
    """Presigned PUT URL plus the public location the object will have."""

    upload_url: str
    expires_in: int
