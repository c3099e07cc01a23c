"""
Job posting Pydantic schemas.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from recruitops.schemas.base import RecordRead

JobStatusValue = Literal["active", "paused", "closed"]


def _lower_status(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


class JobCreate(BaseModel):
    """
    Schema for creating a new job.

    Presence of role code, role name, location and JD link, and the shape of
    the JD link, are checked by the job service so single creates and CSV
    rows share one set of rules.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    role_code: Optional[str] = None
    role_name: Optional[str] = None
    status: JobStatusValue = "active"
    location: Optional[str] = None
    jd_url: Optional[str] = None
    current_updates: Optional[str] = None
    minimum_experience: Optional[str] = None
    duration: Optional[str] = None
    candidate_monthly_ctc: Optional[str] = None
    skills: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        return _lower_status(value)


class JobUpdate(BaseModel):
    """Schema for updating a job. Role code cannot change."""

    model_config = ConfigDict(str_strip_whitespace=True)

    role_name: Optional[str] = None
    status: Optional[JobStatusValue] = None
    location: Optional[str] = None
    jd_url: Optional[str] = None
    current_updates: Optional[str] = None
    minimum_experience: Optional[str] = None
    duration: Optional[str] = None
    candidate_monthly_ctc: Optional[str] = None
    skills: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        return _lower_status(value)


class JobRead(RecordRead):
    """Schema for reading job data."""

    role_code: str
    role_name: Optional[str] = None
    status: str
    location: Optional[str] = None
    jd_url: Optional[str] = None
    current_updates: Optional[str] = None
    minimum_experience: Optional[str] = None
    duration: Optional[str] = None
    candidate_monthly_ctc: Optional[str] = None
    skills: Optional[str] = None
