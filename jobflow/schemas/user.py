"""Schemas for users and authenticated sessions."""

from datetime import datetime

from pydantic import Field

from jobflow.schemas.base import CamelModel


class SessionUser(CamelModel):
    """Identity returned by the authentication collaborator."""

    id: str = Field(..., min_length=1, description="Stable user identifier")
    name: str | None = None
    email: str | None = None
    image: str | None = Field(default=None, description="Profile image URL")


class UserResponse(SessionUser):
    """Stored user record."""

    created_at: datetime
