"""
CV mapping router - JD mapping workflow and hand-off to screening.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.core.dependencies import require_reader, require_writer
from recruitops.db.session import get_db
from recruitops.schemas.cv_mapping import MappingCandidate, MatchResultRead, SelectionRequest, SelectionResult
from recruitops.services.cv_mapping_service import CVMappingService
from recruitops.services.filters import ALL, FilterState

router = APIRouter(prefix="/cv-mapping", tags=["cv-mapping"])


class ScreeningCandidatesResponse(BaseModel):
    items: List[MappingCandidate]
    total: int


@router.get("/results", response_model=List[MatchResultRead], dependencies=[Depends(require_reader)])
async def list_match_results(db: AsyncSession = Depends(get_db)):
    """CV matching tracker, newest first."""
    service = CVMappingService(db)
    return await service.list_match_results()


@router.get("/pending", response_model=List[MappingCandidate], dependencies=[Depends(require_reader)])
async def list_pending_candidates(db: AsyncSession = Depends(get_db)):
    """Candidates not yet sent for JD mapping."""
    service = CVMappingService(db)
    return await service.list_pending()


@router.post("/start", response_model=SelectionResult, dependencies=[Depends(require_writer)])
async def start_mapping(
    data: SelectionRequest,
    db: AsyncSession = Depends(get_db),
):
    """Start JD mapping for the selected candidates."""
    service = CVMappingService(db)
    return await service.start_mapping(data.ids)


@router.get(
    "/screening-candidates",
    response_model=ScreeningCandidatesResponse,
    dependencies=[Depends(require_reader)],
)
async def list_screening_candidates(
    db: AsyncSession = Depends(get_db),
    role_code: str = Query(ALL),
    score_min: Optional[float] = Query(None),
    score_max: Optional[float] = Query(None),
    jd_mapping: str = Query(ALL),
):
    """
    Mapped candidates with their match score.

    Filters: role_code, score_min, score_max (inclusive), jd_mapping.
    """
    state = FilterState(
        role_code=role_code,
        score_min=score_min,
        score_max=score_max,
        jd_mapping=jd_mapping,
    )
    service = CVMappingService(db)
    items, total = await service.list_screening_ready(state)
    return ScreeningCandidatesResponse(items=items, total=total)


@router.post("/start-screening", response_model=SelectionResult, dependencies=[Depends(require_writer)])
async def start_screening(
    data: SelectionRequest,
    db: AsyncSession = Depends(get_db),
):
    """Queue the selected candidates for screening calls."""
    service = CVMappingService(db)
    return await service.start_screening(data.ids)
