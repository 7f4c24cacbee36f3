"""Core application components."""

from jobflow.core.config import settings
from jobflow.core.database import Base
from jobflow.core.exceptions import ApplicationError, ObjectStorageError, StorageError

__all__ = [
    "ApplicationError",
    "Base",
    "ObjectStorageError",
    "StorageError",
    "settings",
]
