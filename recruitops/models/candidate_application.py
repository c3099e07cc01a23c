"""
Candidate application model.

One row per candidate per role applied to. The contact number is what ties
multiple applications of the same person together.
"""

from typing import Optional

from sqlalchemy import String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from recruitops.models.base_model import RecordModel


class JDMapping:
    """Progress of the external CV-to-JD matching workflow."""
    NOT_STARTED = "NOT STARTED"
    STARTED = "STARTED"
    DONE = "DONE"

    ALL = [NOT_STARTED, STARTED, DONE]


class CandidateApplication(RecordModel):
    """
    Candidate applications table.

    A contact number may apply to many roles but only once per role.
    """

    __tablename__ = "candidate_applications"
    __table_args__ = (
        UniqueConstraint("contact_number", "role_code", name="uq_candidate_contact_role"),
    )

    application_id: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        unique=True,
    )

    role_code: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        index=True,
    )

    # Candidate identity
    candidate_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    candidate_email: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    contact_number: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
        index=True,
    )

    # Experience and compensation, kept as entered
    experience_years: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )

    relevant_experience_years: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )

    notice_period: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )

    current_ctc: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )

    salary_expectation: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )

    current_location: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    resume_url: Mapped[Optional[str]] = mapped_column(
        String(1000),
        nullable=True,
    )

    # Role name copied from the job at the time of application
    job_applied: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    skills: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    documents: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    jd_mapping: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=JDMapping.NOT_STARTED,
        server_default=JDMapping.NOT_STARTED,
        index=True,
    )

    screening_response: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
