"""
Models package.

Import all models here so they are registered with SQLAlchemy.
This file also makes it easy to import models from one place.
"""

from recruitops.models.job import JobPosting
from recruitops.models.candidate_application import CandidateApplication
from recruitops.models.match_result import MatchResult
from recruitops.models.screening_outcome import ScreeningOutcome, ScreeningQueueEntry
from recruitops.models.user_role import UserRole

__all__ = [
    "JobPosting",
    "CandidateApplication",
    "MatchResult",
    "ScreeningOutcome",
    "ScreeningQueueEntry",
    "UserRole",
]
