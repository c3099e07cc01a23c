"""
Screening models.

ScreeningOutcome rows come from the external calling system.
ScreeningQueueEntry rows are written when staff start screening a batch.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from recruitops.models.base_model import RecordModel


class ScreeningOutcome(RecordModel):
    """Screening tracker table - one row per screening call."""

    __tablename__ = "screening_outcomes"

    application_id: Mapped[Optional[str]] = mapped_column(
        String(200),
        nullable=True,
        index=True,
    )

    candidate_name: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    role_code: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )

    job_title: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    # Call metadata
    call_status: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )

    call_duration: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )

    recording_link: Mapped[Optional[str]] = mapped_column(
        String(1000),
        nullable=True,
    )

    call_score: Mapped[Optional[float]] = mapped_column(
        Float,
        nullable=True,
    )

    final_score: Mapped[Optional[float]] = mapped_column(
        Float,
        nullable=True,
    )

    # Free text in practice: pending, pass, passed, completed, fail, rejected...
    screening_outcome: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )

    screening_summary: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    # When the call happened, as reported by the calling system
    timestamp: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )


class QueueStatus:
    QUEUED = "queued"
    PROCESSING = "processing"
    DONE = "done"


class ScreeningQueueEntry(RecordModel):
    """Screening batch queue - candidates waiting for a screening call."""

    __tablename__ = "screening_batch_queue"

    application_id: Mapped[Optional[str]] = mapped_column(
        String(200),
        nullable=True,
    )

    role_code: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=QueueStatus.QUEUED,
        server_default=QueueStatus.QUEUED,
        index=True,
    )
