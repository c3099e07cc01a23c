"""
Schemas package.

Import all schemas here for easy access.
"""

from recruitops.schemas.job import JobCreate, JobUpdate, JobRead
from recruitops.schemas.candidate import (
    CandidateCreate,
    CandidateUpdate,
    CandidateRead,
    CandidateRecord,
    GroupedCandidate,
)
from recruitops.schemas.cv_mapping import MatchResultRead, MappingCandidate, SelectionRequest, SelectionResult
from recruitops.schemas.screening import ScreeningOutcomeRead
from recruitops.schemas.ingestion import RowOutcomeRead, ImportSummary
from recruitops.schemas.dashboard import DashboardStats, AnalyticsSummary, OutcomeBreakdown

__all__ = [
    "JobCreate",
    "JobUpdate",
    "JobRead",
    "CandidateCreate",
    "CandidateUpdate",
    "CandidateRead",
    "CandidateRecord",
    "GroupedCandidate",
    "MatchResultRead",
    "MappingCandidate",
    "SelectionRequest",
    "SelectionResult",
    "ScreeningOutcomeRead",
    "RowOutcomeRead",
    "ImportSummary",
    "DashboardStats",
    "AnalyticsSummary",
    "OutcomeBreakdown",
]
