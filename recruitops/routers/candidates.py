"""
Candidates router - API endpoints for candidate applications.
"""

from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.core.config import settings
from recruitops.core.dependencies import require_reader, require_writer
from recruitops.db.session import get_db
from recruitops.schemas.candidate import CandidateCreate, CandidateRead, CandidateUpdate, GroupedCandidate
from recruitops.schemas.ingestion import ImportSummary
from recruitops.services.candidate_service import CandidateService
from recruitops.services.csv_ingestion import build_result_csv
from recruitops.utils.uploads import csv_attachment, read_upload_text, result_filename

router = APIRouter(prefix="/candidates", tags=["candidates"])


@router.get("", response_model=List[CandidateRead], dependencies=[Depends(require_reader)])
async def list_candidates(db: AsyncSession = Depends(get_db)):
    """List every application, newest first."""
    service = CandidateService(db)
    return await service.list_candidates()


@router.get("/grouped", response_model=List[GroupedCandidate], dependencies=[Depends(require_reader)])
async def list_grouped_candidates(db: AsyncSession = Depends(get_db)):
    """One entry per contact number with the person's application history."""
    service = CandidateService(db)
    return await service.grouped_candidates()


@router.post(
    "/import",
    response_model=ImportSummary,
    dependencies=[Depends(require_writer)],
)
async def import_candidates(
    file: UploadFile = File(...),
    format: str = Query("json", pattern="^(json|csv)$"),
    db: AsyncSession = Depends(get_db),
):
    """Bulk-create applications from a CSV upload."""
    text = await read_upload_text(file, settings.CSV_MAX_UPLOAD_BYTES)
    service = CandidateService(db)
    result = await service.import_csv(text)

    if format == "csv":
        return csv_attachment(build_result_csv(result), result_filename("candidate"))
    return result.summary()


@router.get("/{candidate_id}", response_model=CandidateRead, dependencies=[Depends(require_reader)])
async def get_candidate(
    candidate_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get an application by ID."""
    service = CandidateService(db)
    candidate = await service.get_candidate(candidate_id)

    if not candidate:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Candidate {candidate_id} not found",
        )

    return candidate


@router.post(
    "",
    response_model=CandidateRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_writer)],
)
async def create_candidate(
    data: CandidateCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create an application. The application ID is generated."""
    service = CandidateService(db)
    return await service.create_candidate(data)


@router.patch("/{candidate_id}", response_model=CandidateRead, dependencies=[Depends(require_writer)])
async def update_candidate(
    candidate_id: int,
    data: CandidateUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update an application."""
    service = CandidateService(db)
    candidate = await service.update_candidate(candidate_id, data)

    if not candidate:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Candidate {candidate_id} not found",
        )

    return candidate
