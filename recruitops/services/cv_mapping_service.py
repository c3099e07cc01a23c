"""
CV mapping workflow service.

Moves candidates through the JD mapping workflow (NOT STARTED -> STARTED ->
DONE) and hands mapped candidates over to the screening queue. The DONE
transition is made by the external matching process, not here.
"""

import logging
from typing import Dict, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.errors import ValidationFailed
from recruitops.models.candidate_application import CandidateApplication, JDMapping
from recruitops.models.match_result import MatchResult
from recruitops.models.screening_outcome import QueueStatus, ScreeningQueueEntry
from recruitops.repositories.candidate_repository import CandidateRepository
from recruitops.repositories.match_result_repository import MatchResultRepository
from recruitops.repositories.screening_repository import ScreeningRepository
from recruitops.schemas.cv_mapping import MappingCandidate, SelectionResult
from recruitops.services.filters import ALL, FilterState, apply_filters

logger = logging.getLogger(__name__)

EMPTY_SELECTION = "Please select at least one candidate"


def scores_by_application(rows) -> Dict[str, str]:
    """application_id -> score, skipping empty scores. Later rows win."""
    scores: Dict[str, str] = {}
    for application_id, _role_code, score in rows:
        if application_id and score:
            scores[application_id] = score
    return scores


def to_mapping_candidate(candidate: CandidateApplication, score: Optional[str] = None) -> MappingCandidate:
    item = MappingCandidate.model_validate(candidate)
    item.score = score
    return item


class CVMappingService:
    """Service for the CV mapping and screening hand-off screens."""

    def __init__(self, db: AsyncSession):
        self.repository = CandidateRepository(db)
        self.match_repository = MatchResultRepository(db)
        self.screening_repository = ScreeningRepository(db)

    async def list_match_results(self) -> List[MatchResult]:
        return await self.match_repository.list()

    async def list_pending(self) -> List[MappingCandidate]:
        """Candidates whose CV has not been sent for mapping yet."""
        candidates = await self.repository.list(jd_mapping=JDMapping.NOT_STARTED)
        return [to_mapping_candidate(candidate) for candidate in candidates]

    async def start_mapping(self, candidate_ids: List[int]) -> SelectionResult:
        """Tag the selected candidates as STARTED."""
        if not candidate_ids:
            raise ValidationFailed(EMPTY_SELECTION)

        updated = await self.repository.set_jd_mapping(candidate_ids, JDMapping.STARTED)
        logger.info("Started JD mapping for %d candidate(s)", updated)
        return SelectionResult(
            updated=updated,
            message=f"JD mapping started for {updated} candidate(s)",
        )

    async def list_screening_ready(self, state: FilterState) -> Tuple[List[MappingCandidate], int]:
        """
        Mapped candidates with their match score, filtered by state.

        Returns the filtered list and the unfiltered total.
        """
        if state.jd_mapping != ALL and state.jd_mapping not in JDMapping.ALL:
            raise ValidationFailed(
                f'Unknown JD mapping "{state.jd_mapping}"',
                {"allowed": [ALL, *JDMapping.ALL]},
            )

        candidates = await self.repository.list(jd_mapping=JDMapping.DONE)
        scores = scores_by_application(await self.match_repository.list_scores())

        items = [
            to_mapping_candidate(candidate, scores.get(candidate.application_id))
            for candidate in candidates
        ]
        return apply_filters(items, state), len(items)

    async def start_screening(self, candidate_ids: List[int]) -> SelectionResult:
        """Put the selected candidates on the screening batch queue."""
        if not candidate_ids:
            raise ValidationFailed(EMPTY_SELECTION)

        candidates = await self.repository.list_by_ids(candidate_ids)
        entries = [
            ScreeningQueueEntry(
                application_id=candidate.application_id,
                role_code=candidate.role_code,
                status=QueueStatus.QUEUED,
            )
            for candidate in candidates
        ]
        if entries:
            await self.screening_repository.enqueue(entries)

        logger.info("Queued %d candidate(s) for screening", len(entries))
        return SelectionResult(
            updated=len(entries),
            message=f"Screening started for {len(entries)} candidate(s)",
        )
