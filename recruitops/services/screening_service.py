"""
Screening outcome service.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.repositories.screening_repository import ScreeningRepository
from recruitops.schemas.screening import ScreeningOutcomeRead

logger = logging.getLogger(__name__)


class OutcomeClass:
    PENDING = "pending"
    PASSED = "passed"
    REJECTED = "rejected"
    OTHER = "other"


PASSED_OUTCOMES = ("pass", "passed", "completed")
REJECTED_OUTCOMES = ("fail", "failed", "rejected")


def classify_outcome(outcome: Optional[str]) -> str:
    """Map free-text screening outcome onto a display class, case-insensitively."""
    value = (outcome or "").strip().lower()
    if not value or value == "pending":
        return OutcomeClass.PENDING
    if value in PASSED_OUTCOMES:
        return OutcomeClass.PASSED
    if value in REJECTED_OUTCOMES:
        return OutcomeClass.REJECTED
    return OutcomeClass.OTHER


class ScreeningService:
    """Service for the screening tracker."""

    def __init__(self, db: AsyncSession):
        self.repository = ScreeningRepository(db)

    async def list_outcomes(self) -> List[ScreeningOutcomeRead]:
        """Screening calls, most recent first, each tagged with its outcome class."""
        outcomes = await self.repository.list_outcomes()
        items = []
        for outcome in outcomes:
            item = ScreeningOutcomeRead.model_validate(outcome)
            item.outcome_class = classify_outcome(outcome.screening_outcome)
            items.append(item)
        return items
