"""
Screening repository - screening outcomes and the screening batch queue.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.models.screening_outcome import ScreeningOutcome, ScreeningQueueEntry
from recruitops.repositories.store_errors import store_operation


class ScreeningRepository:
    """Repository for screening database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @store_operation("screening.list")
    async def list_outcomes(self) -> List[ScreeningOutcome]:
        """All screening outcomes, most recent call first."""
        result = await self.db.execute(
            select(ScreeningOutcome).order_by(
                ScreeningOutcome.timestamp.desc().nulls_last(),
                ScreeningOutcome.id.desc(),
            )
        )
        return list(result.scalars().all())

    @store_operation("screening.enqueue")
    async def enqueue(self, entries: List[ScreeningQueueEntry]) -> List[ScreeningQueueEntry]:
        """Add candidates to the screening batch queue in one write."""
        async with self.db.begin_nested():
            self.db.add_all(entries)
            await self.db.flush()
        return entries

