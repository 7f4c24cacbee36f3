"""Tests for custom exceptions."""

from fastapi import status

from jobflow.core.exceptions import (
    ApplicationError,
    ObjectStorageError,
    StorageError,
    bad_request_exception,
    format_validation_errors,
    not_found_exception,
    server_error_exception,
)


class TestApplicationError:
    """Tests for ApplicationError base exception."""

    def test_create_error(self):
        error = ApplicationError("Test error message")
        assert error.message == "Test error message"
        assert str(error) == "Test error message"


class TestStorageError:
    """Tests for StorageError."""

    def test_create_error(self):
        error = StorageError(operation="get_stats", detail="connection refused")

        assert error.operation == "get_stats"
        assert error.detail == "connection refused"
        assert "get_stats" in error.message
        assert isinstance(error, ApplicationError)


class TestObjectStorageError:
    """Tests for ObjectStorageError."""

    def test_create_error(self):
        error = ObjectStorageError("upload", "resumes/u1/1.pdf", "Access Denied")

        assert error.key == "resumes/u1/1.pdf"
        assert "upload" in error.message
        assert "Access Denied" in error.message
        assert isinstance(error, ApplicationError)


class TestHTTPExceptionHelpers:
    """Tests for HTTP exception helpers."""

    def test_not_found_exception(self):
        exc = not_found_exception("Job URL not found")
        assert exc.status_code == status.HTTP_404_NOT_FOUND
        assert exc.detail == "Job URL not found"

    def test_bad_request_exception_default(self):
        exc = bad_request_exception()
        assert exc.status_code == status.HTTP_400_BAD_REQUEST
        assert exc.detail == "Invalid data"

    def test_server_error_exception(self):
        exc = server_error_exception("Failed to fetch stats")
        assert exc.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR


class TestFormatValidationErrors:
    """Tests for validation error formatting."""

    def test_strips_location_prefix(self):
        errors = [
            {"loc": ("body", "company"), "msg": "Field required", "type": "missing"},
            {"loc": ("path", "job_url_id"), "msg": "Input should be a valid integer", "type": "int_parsing"},
        ]

        assert format_validation_errors(errors) == [
            {"path": ["company"], "message": "Field required", "code": "missing"},
            {"path": ["job_url_id"], "message": "Input should be a valid integer", "code": "int_parsing"},
        ]

    def test_keeps_nested_path(self):
        errors = [{"loc": ("body", "items", 0, "url"), "msg": "bad", "type": "value_error"}]
        assert format_validation_errors(errors)[0]["path"] == ["items", 0, "url"]
