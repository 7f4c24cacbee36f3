"""Schemas for user preferences."""

from datetime import datetime

from pydantic import Field

from jobflow.schemas.base import CamelModel


class UserPreferencesRequest(CamelModel):
    """Preference fields accepted from the client."""

    qualifications: str | None = Field(default=None, description="Education, certifications")
    work_experience: str | None = Field(default=None, description="Work history summary")
    job_preferences: str | None = Field(default=None, description="Roles, salary, location")
    resume_url: str | None = Field(default=None, description="Uploaded resume URL")


class UserPreferencesCreate(UserPreferencesRequest):
    """Preference fields bound to their owner."""

    user_id: str = Field(..., min_length=1)


class UserPreferencesResponse(UserPreferencesCreate):
    """Stored preferences record."""

    id: int
    updated_at: datetime


EMPTY_PREFERENCES = {
    "qualifications": "",
    "workExperience": "",
    "jobPreferences": "",
}
