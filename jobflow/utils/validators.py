"""Validation logic for request values checked outside schemas."""

from dataclasses import dataclass

from jobflow.schemas import JOB_URL_STATUSES


@dataclass
class ValidationResult:
    """Result of validation process."""

    is_valid: bool
    error: str | None = None


def validate_job_url_status(status: str | None) -> ValidationResult:
    """Check a job URL status transition target."""
    if not status or status not in JOB_URL_STATUSES:
        return ValidationResult(is_valid=False, error="Invalid status")
    return ValidationResult(is_valid=True)


def validate_resume_key(key: str, user_id: str) -> ValidationResult:
    """Check that an object key lies under the user's resume prefix."""
    prefix = f"resumes/{user_id}/"
    if not key.startswith(prefix) or ".." in key or len(key) == len(prefix):
        return ValidationResult(is_valid=False, error="Resume not found")
    return ValidationResult(is_valid=True)
