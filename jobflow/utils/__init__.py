"""Utility functions and classes."""

from jobflow.utils.timestamps import utc_now
from jobflow.utils.validators import (
    ValidationResult,
    validate_job_url_status,
    validate_resume_key,
)

__all__ = [
    "ValidationResult",
    "utc_now",
    "validate_job_url_status",
    "validate_resume_key",
]
