"""
Match result repository - read access to CV matching output.
"""

from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.models.match_result import MatchResult
from recruitops.repositories.store_errors import store_operation


class MatchResultRepository:
    """Repository for MatchResult database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @store_operation("match_results.list")
    async def list(self) -> List[MatchResult]:
        """All match results, newest first."""
        result = await self.db.execute(
            select(MatchResult).order_by(MatchResult.created_at.desc(), MatchResult.id.desc())
        )
        return list(result.scalars().all())

    @store_operation("match_results.scores")
    async def list_scores(self) -> List[Tuple[Optional[str], Optional[str], Optional[str]]]:
        """(application_id, role_code, score) for every match result, oldest first."""
        result = await self.db.execute(
            select(MatchResult.application_id, MatchResult.role_code, MatchResult.score)
            .order_by(MatchResult.created_at.asc(), MatchResult.id.asc())
        )
        return [tuple(row) for row in result.all()]
