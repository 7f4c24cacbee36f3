"""Pytest configuration and fixtures."""

import itertools
import os
import sys
from datetime import datetime, timedelta
from unittest.mock import MagicMock, patch

import pytest
import pytest_asyncio

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing jobflow modules
# An empty DATABASE_URL selects the in-memory backend
os.environ["DATABASE_URL"] = ""
os.environ["DEMO_USER_ID"] = "demo-user-123"
os.environ.setdefault("CLOUDFLARE_R2_BUCKET_NAME", "test-bucket")
os.environ.setdefault("CLOUDFLARE_R2_PUBLIC_URL", "https://files.example.com")

DEMO_USER_ID = "demo-user-123"


@pytest.fixture
def memory_storage():
    """Fresh in-memory storage backend."""
    from jobflow.storage import MemoryStorage

    return MemoryStorage()


@pytest_asyncio.fixture(params=["memory", "database"])
async def storage(request, tmp_path):
    """Each storage backend in turn; the database one runs on SQLite."""
    from jobflow.storage import DatabaseStorage, MemoryStorage

    if request.param == "memory":
        yield MemoryStorage()
    else:
        backend = DatabaseStorage(f"sqlite+aiosqlite:///{tmp_path / 'jobflow.db'}")
        await backend.init()
        yield backend
        await backend.close()


@pytest_asyncio.fixture
async def database_storage(tmp_path):
    """SQLite-backed database storage."""
    from jobflow.storage import DatabaseStorage

    backend = DatabaseStorage(f"sqlite+aiosqlite:///{tmp_path / 'jobflow.db'}")
    await backend.init()
    yield backend
    await backend.close()


@pytest.fixture
def clock():
    """Patch storage timestamps with a clock advancing one second per call."""
    start = datetime(2026, 1, 5, 9, 0, 0)
    ticks = itertools.count()

    def fake_now() -> datetime:
        return start + timedelta(seconds=next(ticks))

    with patch("jobflow.storage.memory.utc_now", fake_now), patch(
        "jobflow.storage.database.utc_now", fake_now
    ):
        yield fake_now


@pytest.fixture
def mock_s3_client():
    """Mock boto3 S3 client."""
    client = MagicMock()
    client.put_object.return_value = {"ETag": '"abc123"'}
    client.delete_object.return_value = {}
    client.generate_presigned_url.return_value = (
        "https://test-bucket.r2.example.com/upload?X-Amz-Signature=abc"
    )
    return client


@pytest.fixture
def resume_storage(mock_s3_client):
    """Resume storage bound to the mock S3 client."""
    from jobflow.services.resume_storage import ResumeStorage

    return ResumeStorage(
        bucket_name="test-bucket",
        public_url="https://files.example.com",
        client=mock_s3_client,
    )


@pytest.fixture
def client(memory_storage, resume_storage):
    """Test client wired to in-memory storage and the mock bucket."""
    from fastapi.testclient import TestClient

    from jobflow.main import app
    from jobflow.services.resume_storage import get_resume_storage
    from jobflow.storage import get_storage

    app.dependency_overrides[get_storage] = lambda: memory_storage
    app.dependency_overrides[get_resume_storage] = lambda: resume_storage
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_job_url():
    """Job URL payload as sent by the frontend."""
    return {
        "url": "https://jobs.example.com/postings/4821",
        "company": "Acme Corp",
        "position": "Backend Engineer",
        "location": "Remote",
    }


@pytest.fixture
def sample_application():
    """Application payload as sent by the frontend."""
    return {
        "company": "Acme Corp",
        "position": "Backend Engineer",
        "location": "Berlin",
        "jobType": "full-time",
        "workType": "hybrid",
        "notes": "Referred by a former colleague",
        "jobUrl": "https://jobs.example.com/postings/4821",
    }


@pytest.fixture
def sample_preferences():
    """Preferences payload as sent by the frontend."""
    return {
        "qualifications": "BSc Computer Science, AWS certified",
        "workExperience": "Backend developer at TechCorp (2021-2024)",
        "jobPreferences": "Remote, Python roles, 80k-120k",
    }
