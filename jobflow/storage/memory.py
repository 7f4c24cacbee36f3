"""In-memory storage backend for development without a database."""

import logging
import threading

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
from jobflow.storage.base import Storage, success_rate
from jobflow.utils.timestamps import utc_now

logger = logging.getLogger(__name__)


class MemoryStorage(Storage):
    """Storage backed by per-entity dicts keyed by a synthetic integer id.

    One counter assigns ids across all entity kinds, so an id is never
    reused while the process lives. Data is lost on restart.
    Callers get copies of the stored records, so changing a returned
    record never changes storage.
    """

    name = "memory"

    def __init__(self):
        self._lock = threading.Lock()
        self._next_id = 1
        self._users: dict[str, UserResponse] = {}
        self._preferences: dict[int, UserPreferencesResponse] = {}
        self._job_urls: dict[int, JobUrlResponse] = {}
        self._applications: dict[int, ApplicationResponse] = {}

    def _allocate_id(self) -> int:
        # Caller holds self._lock
        new_id = self._next_id
        self._next_id += 1
        return new_id

    async def get_user(self, user_id: str) -> UserResponse | None:
        with self._lock:
            user = self._users.get(user_id)
        return user.model_copy() if user else None

    async def create_user(self, user: SessionUser) -> UserResponse:
        with self._lock:
            existing = self._users.get(user.id)
            if existing is not None:
                return existing.model_copy()
            record = UserResponse(**user.model_dump(), created_at=utc_now())
            self._users[user.id] = record
        logger.info(f"Registered user {user.id}")
        return record.model_copy()

    async def update_user(self, user: SessionUser) -> UserResponse | None:
        with self._lock:
            existing = self._users.get(user.id)
            if existing is None:
                return None
            record = existing.model_copy(update=user.model_dump(exclude={"id"}))
            self._users[user.id] = record
        return record.model_copy()

    async def get_user_preferences(
        self, user_id: str
    ) -> UserPreferencesResponse | None:
        with self._lock:
            preferences = self._find_preferences(user_id)
        return preferences.model_copy() if preferences else None

    def _find_preferences(self, user_id: str) -> UserPreferencesResponse | None:
        # Caller holds self._lock
        for preferences in self._preferences.values():
            if preferences.user_id == user_id:
                return preferences
        return None

    async def create_or_update_user_preferences(
        self, data: UserPreferencesCreate
    ) -> UserPreferencesResponse:
        changes = data.model_dump(exclude_none=True)
        with self._lock:
            existing = self._find_preferences(data.user_id)
            if existing is not None:
                record = existing.model_copy(
                    update={**changes, "updated_at": utc_now()}
                )
            else:
                record = UserPreferencesResponse(
                    **data.model_dump(),
                    id=self._allocate_id(),
                    updated_at=utc_now(),
                )
            self._preferences[record.id] = record
        return record.model_copy()

    async def get_job_urls(self, user_id: str) -> list[JobUrlResponse]:
        with self._lock:
            return [
                j.model_copy() for j in self._job_urls.values() if j.user_id == user_id
            ]

    async def create_job_url(self, data: JobUrlCreate) -> JobUrlResponse:
        with self._lock:
            record = JobUrlResponse(
                **data.model_dump(exclude={"status"}),
                id=self._allocate_id(),
                status=data.status or "pending",
                date_added=utc_now(),
            )
            self._job_urls[record.id] = record
        return record.model_copy()

    async def update_job_url_status(
        self, job_url_id: int, status: str
    ) -> JobUrlResponse | None:
        with self._lock:
            existing = self._job_urls.get(job_url_id)
            if existing is None:
                return None
            record = existing.model_copy(update={"status": status})
            self._job_urls[job_url_id] = record
        return record.model_copy()

    async def delete_job_url(self, job_url_id: int) -> bool:
        with self._lock:
            return self._job_urls.pop(job_url_id, None) is not None

    async def get_applications(self, user_id: str) -> list[ApplicationResponse]:
        with self._lock:
            return [
                a.model_copy()
                for a in self._applications.values()
                if a.user_id == user_id
            ]

    async def create_application(self, data: ApplicationCreate) -> ApplicationResponse:
        now = utc_now()
        with self._lock:
            record = ApplicationResponse(
                **data.model_dump(exclude={"status"}),
                id=self._allocate_id(),
                status=data.status or "pending",
                applied_date=now,
                last_update=now,
            )
            self._applications[record.id] = record
        return record.model_copy()

    async def update_application(
        self, application_id: int, updates: ApplicationUpdateRequest
    ) -> ApplicationResponse | None:
        with self._lock:
            existing = self._applications.get(application_id)
            if existing is None:
                return None
            record = existing.model_copy(
                update={**updates.changes(), "last_update": utc_now()}
            )
            self._applications[application_id] = record
        return record.model_copy()

    async def delete_application(self, application_id: int) -> bool:
        with self._lock:
            return self._applications.pop(application_id, None) is not None

    async def get_stats(self, user_id: str) -> StatsResponse:
        applications = await self.get_applications(user_id)
        job_urls = await self.get_job_urls(user_id)

        total = len(applications)
        accepted = sum(1 for a in applications if a.status == "accepted")
        return StatsResponse(
            total_applications=total,
            pending_urls=sum(1 for j in job_urls if j.status == "pending"),
            interviews=sum(1 for a in applications if a.status == "interview"),
            success_rate=success_rate(accepted, total),
        )
