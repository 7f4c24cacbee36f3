"""Application services."""

from jobflow.services.resume_storage import ResumeStorage, get_resume_storage

__all__ = ["ResumeStorage", "get_resume_storage"]
