"""
Candidate application Pydantic schemas.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from recruitops.schemas.base import RecordRead


class CandidateCreate(BaseModel):
    """Schema for creating a candidate application. The application ID is generated."""

    model_config = ConfigDict(str_strip_whitespace=True)

    role_code: Optional[str] = None
    candidate_name: Optional[str] = None
    candidate_email: Optional[str] = None
    contact_number: Optional[str] = None
    experience_years: Optional[str] = None
    relevant_experience_years: Optional[str] = None
    notice_period: Optional[str] = None
    current_ctc: Optional[str] = None
    salary_expectation: Optional[str] = None
    current_location: Optional[str] = None
    resume_url: Optional[str] = None
    job_applied: Optional[str] = None
    skills: Optional[str] = None
    documents: Optional[str] = None


class CandidateUpdate(BaseModel):
    """Schema for updating a candidate application. All fields optional."""

    model_config = ConfigDict(str_strip_whitespace=True)

    application_id: Optional[str] = None
    role_code: Optional[str] = None
    candidate_name: Optional[str] = None
    candidate_email: Optional[str] = None
    contact_number: Optional[str] = None
    experience_years: Optional[str] = None
    relevant_experience_years: Optional[str] = None
    notice_period: Optional[str] = None
    current_ctc: Optional[str] = None
    salary_expectation: Optional[str] = None
    current_location: Optional[str] = None
    resume_url: Optional[str] = None
    job_applied: Optional[str] = None
    skills: Optional[str] = None
    documents: Optional[str] = None


class CandidateRead(RecordRead):
    """Schema for reading a candidate application."""

    application_id: str
    role_code: Optional[str] = None
    candidate_name: str
    candidate_email: Optional[str] = None
    contact_number: Optional[str] = None
    experience_years: Optional[str] = None
    relevant_experience_years: Optional[str] = None
    notice_period: Optional[str] = None
    current_ctc: Optional[str] = None
    salary_expectation: Optional[str] = None
    current_location: Optional[str] = None
    resume_url: Optional[str] = None
    job_applied: Optional[str] = None
    skills: Optional[str] = None
    documents: Optional[str] = None
    jd_mapping: Optional[str] = None
    screening_response: Optional[str] = None


class GroupedCandidate(BaseModel):
    """
    One person, identified by contact number, with every application they made.

    Derived on each read; never stored.
    """

    contact: str
    name: str
    location: str
    applied_on: date
    role_codes: List[str]
    last_applied: Optional[date] = None
    # Each entry reads "<role code>: <score>, <screening response>"
    last_applied_roles: List[str]
    times_applied: int
    applications: List[CandidateRead]


class CandidateRecord(CandidateCreate):
    """A candidate ready for insertion, carrying its generated application ID."""

    application_id: str
