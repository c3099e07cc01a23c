"""
Dashboard and analytics service.

Dashboard counts come straight from the store; the analytics summary is
computed in memory from the screening outcomes.
"""

import logging
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.models.screening_outcome import QueueStatus, ScreeningOutcome
from recruitops.repositories.candidate_repository import CandidateRepository
from recruitops.repositories.screening_repository import ScreeningRepository
from recruitops.repositories.stats_repository import StatsRepository
from recruitops.schemas.dashboard import AnalyticsSummary, DashboardStats, OutcomeBreakdown
from recruitops.services.screening_service import REJECTED_OUTCOMES

logger = logging.getLogger(__name__)

SCREENED_OUTCOMES = ["pass", "passed", "completed"]
PASS_OUTCOMES = ("pass", "passed")


def summarize_outcomes(outcomes: Iterable[ScreeningOutcome], total_candidates: int) -> AnalyticsSummary:
    """
    Average score, pass rate and outcome breakdown over screening rows.

    The average only counts rows with a non-zero final score. Pass rate is
    pass/passed over all screened rows, as a percentage.
    """
    outcomes = list(outcomes)
    breakdown = OutcomeBreakdown()
    passed = 0
    scores = []

    for outcome in outcomes:
        value = (outcome.screening_outcome or "").strip().lower()
        if not value or value == "pending":
            breakdown.pending += 1
        elif value in SCREENED_OUTCOMES:
            breakdown.completed += 1
        elif value in REJECTED_OUTCOMES:
            breakdown.rejected += 1

        if value in PASS_OUTCOMES:
            passed += 1
        if outcome.final_score:
            scores.append(outcome.final_score)

    total_screened = len(outcomes)
    avg_score = round(sum(scores) / len(scores), 1) if scores else 0.0
    pass_rate = round(passed / total_screened * 100, 1) if total_screened else 0.0

    return AnalyticsSummary(
        total_candidates=total_candidates,
        total_screened=total_screened,
        avg_score=avg_score,
        pass_rate=pass_rate,
        by_status=breakdown,
    )


class AnalyticsService:
    """Service for the dashboard counters and screening analytics."""

    def __init__(self, db: AsyncSession):
        self.repository = StatsRepository(db)
        self.candidate_repository = CandidateRepository(db)
        self.screening_repository = ScreeningRepository(db)

    async def dashboard_stats(self) -> DashboardStats:
        counts = await self.repository.dashboard_counts(SCREENED_OUTCOMES, QueueStatus.PROCESSING)
        return DashboardStats(**counts)

    async def analytics_summary(self) -> AnalyticsSummary:
        total_candidates = await self.candidate_repository.count()
        outcomes = await self.screening_repository.list_outcomes()
        summary = summarize_outcomes(outcomes, total_candidates)
        logger.debug(
            "Analytics: %d screened, pass rate %.1f%%",
            summary.total_screened,
            summary.pass_rate,
        )
        return summary
