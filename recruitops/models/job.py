"""
Job posting model.

A role the team is hiring for, keyed by its role code.
"""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from recruitops.models.base_model import RecordModel


class JobStatus:
    ACTIVE = "active"
    PAUSED = "paused"
    CLOSED = "closed"

    ALL = [ACTIVE, PAUSED, CLOSED]


class JobPosting(RecordModel):
    """
    Jobs table.

    Role code is unique across the store and never changes after creation.
    """

    __tablename__ = "jobs"

    role_code: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
    )

    role_name: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    # Status: 'active', 'paused' or 'closed'
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=JobStatus.ACTIVE,
        server_default=JobStatus.ACTIVE,
        index=True,
    )

    location: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    # "Brief context about the role (JD)" - a link to the JD file, never its content
    jd_url: Mapped[Optional[str]] = mapped_column(
        String(1000),
        nullable=True,
    )

    current_updates: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    minimum_experience: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )

    duration: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )

    candidate_monthly_ctc: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )

    # Comma-separated skills (e.g. "python,sql,aws")
    skills: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
