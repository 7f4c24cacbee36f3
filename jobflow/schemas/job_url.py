"""Schemas for submitted job URLs."""

from datetime import datetime
from typing import Literal, get_args

from pydantic import Field

from jobflow.schemas.base import CamelModel

JobUrlStatus = Literal["pending", "applied", "duplicate"]
JOB_URL_STATUSES: tuple[str, ...] = get_args(JobUrlStatus)


class JobUrlRequest(CamelModel):
    """Job URL fields accepted from the client."""

    url: str = Field(..., min_length=1, description="Job posting URL")
    company: str | None = None
    position: str | None = None
    location: str | None = None
    status: JobUrlStatus | None = Field(
        default=None, description="pending, applied or duplicate"
    )


class JobUrlCreate(JobUrlRequest):
    """Job URL fields bound to their owner."""

    user_id: str = Field(..., min_length=1)


class JobUrlStatusRequest(CamelModel):
    """Body of a status transition."""

    status: str | None = None


class JobUrlResponse(CamelModel):
    """Stored job URL record."""

    id: int
    user_id: str
    url: str
    company: str | None = None
    position: str | None = None
    location: str | None = None
    status: JobUrlStatus
    date_added: datetime
