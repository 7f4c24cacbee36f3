"""Schemas for dashboard statistics."""

from pydantic import Field

from jobflow.schemas.base import CamelModel


class StatsResponse(CamelModel):
    """Aggregate counts over a user's applications and job URLs."""

    total_applications: int = Field(default=0, ge=0)
    pending_urls: int = Field(default=0, ge=0)
    interviews: int = Field(default=0, ge=0)
    success_rate: int = Field(default=0, ge=0, le=100, description="Accepted share, percent")
