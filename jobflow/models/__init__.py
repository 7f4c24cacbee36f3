"""Database models."""

from jobflow.models.application import Application
from jobflow.models.job_url import JobUrl
from jobflow.models.preferences import UserPreferences
from jobflow.models.user import User

__all__ = [
    "Application",
    "JobUrl",
    "User",
    "UserPreferences",
]
