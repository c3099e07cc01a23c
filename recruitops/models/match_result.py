"""
CV match result model.

Written by the external CV-to-JD matching process; this service only reads it.
"""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from recruitops.models.base_model import RecordModel


class MatchResult(RecordModel):
    """CV matching table, joined to applications by (application_id, role_code)."""

    __tablename__ = "cv_match_results"

    application_id: Mapped[Optional[str]] = mapped_column(
        String(200),
        nullable=True,
        index=True,
    )

    role_code: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )

    # Numeric-as-text, e.g. "78.5"
    score: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )

    extracted_skills: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    missing_skills: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    jd_summary: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    resume_summary: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
