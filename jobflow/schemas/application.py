"""Schemas for tracked job applications."""

from datetime import datetime
from typing import Literal, get_args

from pydantic import Field, field_validator

from jobflow.schemas.base import CamelModel

ApplicationStatus = Literal["pending", "interview", "rejected", "accepted"]
APPLICATION_STATUSES: tuple[str, ...] = get_args(ApplicationStatus)


class ApplicationRequest(CamelModel):
    """Application fields accepted from the client."""

    company: str = Field(..., min_length=1, description="Company name")
    position: str = Field(..., min_length=1, description="Position title")
    location: str | None = None
    job_type: str | None = Field(default=None, description="full-time, part-time, contract")
    work_type: str | None = Field(default=None, description="remote, hybrid, on-site")
    status: ApplicationStatus | None = Field(
        default=None, description="pending, interview, rejected or accepted"
    )
    notes: str | None = None
    job_url: str | None = Field(default=None, description="Source job posting URL")
    resume_used: str | None = Field(default=None, description="Resume sent with the application")


class ApplicationCreate(ApplicationRequest):
    """Application fields bound to their owner."""

    user_id: str = Field(..., min_length=1)


class ApplicationUpdateRequest(CamelModel):
    """Partial application update; only supplied fields are applied."""

    company: str | None = Field(default=None, min_length=1)
    position: str | None = Field(default=None, min_length=1)
    location: str | None = None
    job_type: str | None = None
    work_type: str | None = None
    status: ApplicationStatus | None = None
    notes: str | None = None
    job_url: str | None = None
    resume_used: str | None = None

    @field_validator("company", "position", "status")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("Field may not be null")
        return value

    def changes(self) -> dict:
        """Fields explicitly supplied by the client, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class ApplicationResponse(CamelModel):
    """Stored application record."""

    id: int
    user_id: str
    company: str
    position: str
    location: str | None = None
    job_type: str | None = None
    work_type: str | None = None
    status: ApplicationStatus
    applied_date: datetime
    last_update: datetime
    notes: str | None = None
    job_url: str | None = None
    resume_used: str | None = None
