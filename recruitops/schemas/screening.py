"""
Screening outcome Pydantic schemas.
"""

from datetime import datetime
from typing import Optional

from recruitops.schemas.base import RecordRead


class ScreeningOutcomeRead(RecordRead):
    """Schema for reading a screening call outcome."""

    application_id: Optional[str] = None
    candidate_name: Optional[str] = None
    role_code: Optional[str] = None
    job_title: Optional[str] = None
    call_status: Optional[str] = None
    call_duration: Optional[int] = None
    recording_link: Optional[str] = None
    call_score: Optional[float] = None
    final_score: Optional[float] = None
    screening_outcome: Optional[str] = None
    screening_summary: Optional[str] = None
    timestamp: Optional[datetime] = None
    # pending / passed / rejected / other, derived from screening_outcome
    outcome_class: Optional[str] = None
