"""Storage backends and the process-wide storage instance."""

import logging

from jobflow.core.config import Settings, settings
from jobflow.storage.base import Storage, success_rate
from jobflow.storage.database import DatabaseStorage
from jobflow.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)

_storage: Storage | None = None


def create_storage(config: Settings) -> Storage:
    """Select the backend from configuration."""
    if config.use_database:
        logger.info("DATABASE_URL configured - using database storage")
        return DatabaseStorage(config.async_database_url)
    logger.warning("DATABASE_URL not provided - using in-memory storage")
    return MemoryStorage()


def get_storage() -> Storage:
    """Get or create the process-wide storage backend."""
    global _storage
    if _storage is None:
        _storage = create_storage(settings)
    return _storage


async def close_storage() -> None:
    """Close the storage backend."""
    global _storage
    if _storage is not None:
        await _storage.close()
        _storage = None


__all__ = [
    "DatabaseStorage",
    "MemoryStorage",
    "Storage",
    "close_storage",
    "create_storage",
    "get_storage",
    "success_rate",
]
