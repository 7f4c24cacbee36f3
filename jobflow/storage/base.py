"""Storage interface shared by the persistent and in-memory backends."""

from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal

from jobflow.schemas import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationUpdateRequest,
    JobUrlCreate,
    JobUrlResponse,
    SessionUser,
    StatsResponse,
    UserPreferencesCreate,
    UserPreferencesResponse,
    UserResponse,
)


def success_rate(accepted: int, total: int) -> int:
    """Percentage of accepted applications, rounded half up; 0 when total is 0."""
    if total <= 0:
        return 0
    rate = Decimal(accepted * 100) / Decimal(total)
    return int(rate.quantize(Decimal(1), rounding=ROUND_HALF_UP))


class Storage(ABC):
    """CRUD operations over users, preferences, job URLs and applications.

    Absence is reported with ``None`` (lookups, updates) or ``False``
    (deletes). Failures of the underlying store raise ``StorageError``.
    """

    name: str = "storage"

    async def init(self) -> None:
        """Prepare the backend for use."""

    async def close(self) -> None:
        """Release backend resources."""

    # Users

    @abstractmethod
    async def get_user(self, user_id: str) -> UserResponse | None: ...

    @abstractmethod
    async def create_user(self, user: SessionUser) -> UserResponse:
        """Store a user; an already stored id returns the existing record."""

    @abstractmethod
    async def update_user(self, user: SessionUser) -> UserResponse | None:
        """Overwrite the stored profile fields of ``user.id``."""

    # User preferences

    @abstractmethod
    async def get_user_preferences(
        self, user_id: str
    ) -> UserPreferencesResponse | None: ...

    @abstractmethod
    async def create_or_update_user_preferences(
        self, data: UserPreferencesCreate
    ) -> UserPreferencesResponse:
        """Upsert the single preferences record of ``data.user_id``.

        An existing record takes the non-null fields of ``data`` and a fresh
        ``updated_at``; otherwise a new record is created.
        """

    # Job URLs

    @abstractmethod
    async def get_job_urls(self, user_id: str) -> list[JobUrlResponse]: ...

    @abstractmethod
    async def create_job_url(self, data: JobUrlCreate) -> JobUrlResponse: ...

    @abstractmethod
    async def update_job_url_status(
        self, job_url_id: int, status: str
    ) -> JobUrlResponse | None: ...

    @abstractmethod
    async def delete_job_url(self, job_url_id: int) -> bool: ...

    # Applications

    @abstractmethod
    async def get_applications(self, user_id: str) -> list[ApplicationResponse]: ...

    @abstractmethod
    async def create_application(
        self, data: ApplicationCreate
    ) -> ApplicationResponse: ...

    @abstractmethod
    async def update_application(
        self, application_id: int, updates: ApplicationUpdateRequest
    ) -> ApplicationResponse | None: ...

    @abstractmethod
    async def delete_application(self, application_id: int) -> bool: ...

    # Stats

    @abstractmethod
    async def get_stats(self, user_id: str) -> StatsResponse: ...
