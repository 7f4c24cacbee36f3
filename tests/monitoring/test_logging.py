"""Test logging functionality."""

import logging
from unittest.mock import AsyncMock

from jobflow.core.exceptions import StorageError


class TestLogging:
    """Test logging functionality."""

    def test_mutations_are_logged(self, client, caplog):
        """Test that created records are logged."""
        with caplog.at_level(logging.INFO):
            client.post(
                "/api/applications",
                json={"company": "Acme Corp", "position": "Backend Engineer"},
            )

        messages = [record.getMessage() for record in caplog.records]
        assert any("Backend Engineer at Acme Corp" in m for m in messages)

    def test_first_request_registers_demo_user(self, client, caplog):
        """Test that first sight of a user is logged."""
        with caplog.at_level(logging.INFO):
            client.get("/api/job-urls")

        assert "Registered user demo-user-123" in caplog.text

    def test_storage_errors_are_logged(self, client, memory_storage, caplog):
        """Test that storage failures are logged at ERROR."""
        memory_storage.get_stats = AsyncMock(
            side_effect=StorageError("get_stats", "connection refused")
        )

        with caplog.at_level(logging.ERROR):
            response = client.get("/api/stats")

        assert response.status_code == 500
        error_logs = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert any("connection refused" in r.getMessage() for r in error_logs)
