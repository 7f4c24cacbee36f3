"""Relational storage backend on async SQLAlchemy."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from jobflow.core.database import create_engine, create_session_factory, init_models
from jobflow.core.exceptions import StorageError
from jobflow.models import Application, JobUrl, User, UserPreferences
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


class DatabaseStorage(Storage):
    """Storage delegating to a relational database.

    Each operation runs in its own session and commits once, so a failure
    leaves nothing behind.
    """

    name = "database"

    def __init__(self, database_url: str, engine: AsyncEngine | None = None):
        self._engine = engine or create_engine(database_url)
        self._session_factory = create_session_factory(self._engine)

    async def init(self) -> None:
        """Create missing tables."""
        try:
            await init_models(self._engine)
        except SQLAlchemyError as e:
            raise StorageError("init", str(e)) from e
        logger.info("Database tables ready")

    async def close(self) -> None:
        await self._engine.dispose()

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"Database error during {operation}: {e}")
                raise StorageError(operation, str(e)) from e

    # Users

    async def get_user(self, user_id: str) -> UserResponse | None:
        async with self._session("get_user") as session:
            user = await session.get(User, user_id)
            return UserResponse.model_validate(user) if user else None

    async def create_user(self, user: SessionUser) -> UserResponse:
        async with self._session("create_user") as session:
            existing = await session.get(User, user.id)
            if existing is not None:
                return UserResponse.model_validate(existing)

            row = User(**user.model_dump())
            session.add(row)
            try:
                await session.commit()
            except IntegrityError:
                # Registered concurrently by another request
                await session.rollback()
                row = await session.get(User, user.id)
                return UserResponse.model_validate(row)
            await session.refresh(row)
            logger.info(f"Registered user {user.id}")
            return UserResponse.model_validate(row)

    async def update_user(self, user: SessionUser) -> UserResponse | None:
        async with self._session("update_user") as session:
            row = await session.get(User, user.id)
            if row is None:
                return None
            self._apply(row, user.model_dump(exclude={"id"}))
            await session.commit()
            await session.refresh(row)
            return UserResponse.model_validate(row)

    # User preferences

    async def get_user_preferences(
        self, user_id: str
    ) -> UserPreferencesResponse | None:
        async with self._session("get_user_preferences") as session:
            row = await self._find_preferences(session, user_id)
            return UserPreferencesResponse.model_validate(row) if row else None

    @staticmethod
    async def _find_preferences(
        session: AsyncSession, user_id: str
    ) -> UserPreferences | None:
        result = await session.execute(
            select(UserPreferences).where(UserPreferences.user_id == user_id).limit(1)
        )
        return result.scalars().first()

    async def create_or_update_user_preferences(
        self, data: UserPreferencesCreate
    ) -> UserPreferencesResponse:
        changes = data.model_dump(exclude_none=True)
        async with self._session("create_or_update_user_preferences") as session:
            row = await self._find_preferences(session, data.user_id)
            if row is None:
                row = UserPreferences(**changes, updated_at=utc_now())
                session.add(row)
                try:
                    await session.commit()
                except IntegrityError:
                    # A concurrent request inserted first; the unique user_id
                    # constraint rejected ours, so merge into that record.
                    await session.rollback()
                    row = await self._find_preferences(session, data.user_id)
                    if row is None:
                        raise
                    self._apply(row, changes)
                    row.updated_at = utc_now()
                    await session.commit()
            else:
                self._apply(row, changes)
                row.updated_at = utc_now()
                await session.commit()
            await session.refresh(row)
            return UserPreferencesResponse.model_validate(row)

    @staticmethod
    def _apply(row, changes: dict) -> None:
        for field, value in changes.items():
            setattr(row, field, value)

    # Job URLs

    async def get_job_urls(self, user_id: str) -> list[JobUrlResponse]:
        async with self._session("get_job_urls") as session:
            result = await session.execute(
                select(JobUrl)
                .where(JobUrl.user_id == user_id)
                .order_by(JobUrl.date_added, JobUrl.id)
            )
            return [JobUrlResponse.model_validate(row) for row in result.scalars()]

    async def create_job_url(self, data: JobUrlCreate) -> JobUrlResponse:
        async with self._session("create_job_url") as session:
            row = JobUrl(
                **data.model_dump(exclude={"status"}),
                status=data.status or "pending",
                date_added=utc_now(),
            )
            session.add(row)
            await session.commit()
            await session.refresh(row)
            return JobUrlResponse.model_validate(row)

    async def update_job_url_status(
        self, job_url_id: int, status: str
    ) -> JobUrlResponse | None:
        async with self._session("update_job_url_status") as session:
            row = await session.get(JobUrl, job_url_id)
            if row is None:
                return None
            row.status = status
            await session.commit()
            await session.refresh(row)
            return JobUrlResponse.model_validate(row)

    async def delete_job_url(self, job_url_id: int) -> bool:
        async with self._session("delete_job_url") as session:
            row = await session.get(JobUrl, job_url_id)
            if row is None:
                return False
            await session.delete(row)
            await session.commit()
            return True

    # Applications

    async def get_applications(self, user_id: str) -> list[ApplicationResponse]:
        async with self._session("get_applications") as session:
            result = await session.execute(
                select(Application)
                .where(Application.user_id == user_id)
                .order_by(Application.applied_date, Application.id)
            )
            return [
                ApplicationResponse.model_validate(row) for row in result.scalars()
            ]

    async def create_application(self, data: ApplicationCreate) -> ApplicationResponse:
        now = utc_now()
        async with self._session("create_application") as session:
            row = Application(
                **data.model_dump(exclude={"status"}),
                status=data.status or "pending",
                applied_date=now,
                last_update=now,
            )
            session.add(row)
            await session.commit()
            await session.refresh(row)
            return ApplicationResponse.model_validate(row)

    async def update_application(
        self, application_id: int, updates: ApplicationUpdateRequest
    ) -> ApplicationResponse | None:
        async with self._session("update_application") as session:
            row = await session.get(Application, application_id)
            if row is None:
                return None
            self._apply(row, updates.changes())
            row.last_update = utc_now()
            await session.commit()
            await session.refresh(row)
            return ApplicationResponse.model_validate(row)

    async def delete_application(self, application_id: int) -> bool:
        async with self._session("delete_application") as session:
            row = await session.get(Application, application_id)
            if row is None:
                return False
            await session.delete(row)
            await session.commit()
            return True

    # Stats

    async def get_stats(self, user_id: str) -> StatsResponse:
        async with self._session("get_stats") as session:
            result = await session.execute(
                select(Application.status, func.count())
                .where(Application.user_id == user_id)
                .group_by(Application.status)
            )
            by_status = {status: count for status, count in result.all()}

            pending_urls = await session.scalar(
                select(func.count())
                .select_from(JobUrl)
                .where(JobUrl.user_id == user_id, JobUrl.status == "pending")
            )

        total = sum(by_status.values())
        return StatsResponse(
            total_applications=total,
            pending_urls=pending_urls or 0,
            interviews=by_status.get("interview", 0),
            success_rate=success_rate(by_status.get("accepted", 0), total),
        )
