"""
Jobs router - API endpoints for job postings.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.core.config import settings
from recruitops.core.dependencies import require_reader, require_writer
from recruitops.db.session import get_db
from recruitops.schemas.ingestion import ImportSummary
from recruitops.schemas.job import JobCreate, JobRead, JobUpdate
from recruitops.services.csv_ingestion import build_result_csv
from recruitops.services.job_service import JobService
from recruitops.utils.uploads import csv_attachment, read_upload_text, result_filename

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=List[JobRead], dependencies=[Depends(require_reader)])
async def list_jobs(
    db: AsyncSession = Depends(get_db),
    status: Optional[str] = Query(None, description="active, paused, closed or all"),
):
    """List job postings, newest first."""
    service = JobService(db)
    return await service.list_jobs(status=status)


@router.post(
    "/import",
    response_model=ImportSummary,
    dependencies=[Depends(require_writer)],
)
async def import_jobs(
    file: UploadFile = File(...),
    format: str = Query("json", pattern="^(json|csv)$"),
    db: AsyncSession = Depends(get_db),
):
    """
    Bulk-create jobs from a CSV upload.

    Returns the per-row summary, or with format=csv the result report as a
    download.
    """
    text = await read_upload_text(file, settings.CSV_MAX_UPLOAD_BYTES)
    service = JobService(db)
    result = await service.import_csv(text)

    if format == "csv":
        return csv_attachment(build_result_csv(result), result_filename("job"))
    return result.summary()


@router.get("/{job_id}", response_model=JobRead, dependencies=[Depends(require_reader)])
async def get_job(
    job_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a job by ID."""
    service = JobService(db)
    job = await service.get_job(job_id)

    if not job:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Job {job_id} not found",
        )

    return job


@router.post(
    "",
    response_model=JobRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_writer)],
)
async def create_job(
    data: JobCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new job posting."""
    service = JobService(db)
    return await service.create_job(data)


@router.patch("/{job_id}", response_model=JobRead, dependencies=[Depends(require_writer)])
async def update_job(
    job_id: int,
    data: JobUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a job posting. The role code cannot be changed."""
    service = JobService(db)
    job = await service.update_job(job_id, data)

    if not job:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Job {job_id} not found",
        )

    return job
