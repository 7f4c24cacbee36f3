"""Job URL model."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobflow.core.database import Base
from jobflow.utils.timestamps import utc_now


class JobUrl(Base):
    """Model for job posting URLs submitted by a user."""

    __tablename__ = "job_urls"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    position: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # pending, applied, duplicate
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="pending")
    date_added: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, nullable=False, index=True
    )
