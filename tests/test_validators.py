"""Tests for validation helpers."""

import pytest

from jobflow.utils.validators import (
    ValidationResult,
    validate_job_url_status,
    validate_resume_key,
)


class TestValidateJobUrlStatus:
    """Tests for job URL status validation."""

    @pytest.mark.parametrize("status", ["pending", "applied", "duplicate"])
    def test_known_statuses(self, status):
        assert validate_job_url_status(status) == ValidationResult(is_valid=True)

    @pytest.mark.parametrize("status", ["interview", "PENDING", "", None])
    def test_unknown_statuses(self, status):
        result = validate_job_url_status(status)

        assert result.is_valid is False
        assert result.error == "Invalid status"


class TestValidateResumeKey:
    """Tests for resume key ownership checks."""

    def test_own_key(self):
        assert validate_resume_key("resumes/u1/1760000000000.pdf", "u1").is_valid

    def test_other_users_key(self):
        assert not validate_resume_key("resumes/u2/1760000000000.pdf", "u1").is_valid

    def test_prefix_only(self):
        assert not validate_resume_key("resumes/u1/", "u1").is_valid

    def test_path_traversal(self):
        assert not validate_resume_key("resumes/u1/../u2/1.pdf", "u1").is_valid

    def test_user_id_prefix_collision(self):
        assert not validate_resume_key("resumes/u10/1.pdf", "u1").is_valid
