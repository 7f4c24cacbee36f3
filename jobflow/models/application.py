"""Job application model."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobflow.core.database import Base
from jobflow.utils.timestamps import utc_now


class Application(Base):
    """Model for tracking job applications."""

    __tablename__ = "applications"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    company: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # full-time, part-time, contract, ...
    job_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    # remote, hybrid, on-site
    work_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    # pending, interview, rejected, accepted
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="pending")
    applied_date: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, nullable=False, index=True
    )
    last_update: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, nullable=False
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    job_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    resume_used: Mapped[str | None] = mapped_column(String(1024), nullable=True)
