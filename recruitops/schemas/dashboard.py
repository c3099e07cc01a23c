"""
Dashboard and analytics Pydantic schemas.
"""

from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_jobs: int = 0
    total_candidates: int = 0
    screened_candidates: int = 0
    active_screenings: int = 0


class OutcomeBreakdown(BaseModel):
    pending: int = 0
    completed: int = 0
    rejected: int = 0


class AnalyticsSummary(BaseModel):
    """Screening analytics. Scores and rates are rounded to one decimal."""

    total_candidates: int = 0
    total_screened: int = 0
    avg_score: float = 0.0
    pass_rate: float = 0.0
    by_status: OutcomeBreakdown = OutcomeBreakdown()
