"""
Stats repository - count-only reads for the dashboard.
"""

from typing import Dict, List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.models.candidate_application import CandidateApplication
from recruitops.models.job import JobPosting
from recruitops.models.screening_outcome import ScreeningOutcome, ScreeningQueueEntry
from recruitops.repositories.store_errors import store_operation


class StatsRepository:
    """Aggregate counts across collections."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @store_operation("stats.dashboard_counts")
    async def dashboard_counts(self, screened_outcomes: List[str], active_queue_status: str) -> Dict[str, int]:
        """
        Count jobs, candidates, screened candidates and active screenings.

        All four counts come back from one statement, so the dashboard never
        shows a mix of old and new numbers.
        """
        jobs = select(func.count(JobPosting.id)).scalar_subquery()
        candidates = select(func.count(CandidateApplication.id)).scalar_subquery()
        screened = (
            select(func.count(ScreeningOutcome.id))
            .where(func.lower(ScreeningOutcome.screening_outcome).in_(screened_outcomes))
            .scalar_subquery()
        )
        active = (
            select(func.count(ScreeningQueueEntry.id))
            .where(ScreeningQueueEntry.status == active_queue_status)
            .scalar_subquery()
        )

        result = await self.db.execute(
            select(
                jobs.label("total_jobs"),
                candidates.label("total_candidates"),
                screened.label("screened_candidates"),
                active.label("active_screenings"),
            )
        )
        row = result.one()
        return {key: int(value or 0) for key, value in row._mapping.items()}
