"""
CV mapping and match-result Pydantic schemas.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from recruitops.schemas.base import RecordRead


class MatchResultRead(RecordRead):
    """One row of the CV matching tracker."""

    application_id: Optional[str] = None
    role_code: Optional[str] = None
    score: Optional[str] = None
    extracted_skills: Optional[str] = None
    missing_skills: Optional[str] = None
    jd_summary: Optional[str] = None
    resume_summary: Optional[str] = None


class MappingCandidate(BaseModel):
    """A candidate as shown on the CV mapping screens, with its match score if any."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    application_id: Optional[str] = None
    candidate_name: Optional[str] = None
    role_code: Optional[str] = None
    job_applied: Optional[str] = None
    candidate_email: Optional[str] = None
    jd_mapping: Optional[str] = None
    score: Optional[str] = None


class SelectionRequest(BaseModel):
    """Record IDs picked in a table for a bulk action."""

    ids: List[int] = Field(default_factory=list)


class SelectionResult(BaseModel):
    updated: int
    message: str
