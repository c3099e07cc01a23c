"""
Job business logic service.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.errors import DuplicateEntry, NoValidRows, ValidationFailed
from recruitops.models.job import JobPosting
from recruitops.repositories.job_repository import JobRepository
from recruitops.schemas.job import JobCreate, JobUpdate
from recruitops.services.csv_ingestion import (
    JD_URL_REASON,
    JOB_COLUMNS,
    JOB_REQUIRED_FIELDS,
    NO_VALID_ROWS,
    IngestionResult,
    RowStatus,
    check_job_fields,
    missing_field_reason,
    read_csv,
    validate_job_rows,
)
from recruitops.services.filters import ALL
from recruitops.utils.url_validation import is_http_url

logger = logging.getLogger(__name__)


class JobService:
    """Service for job business logic."""

    def __init__(self, db: AsyncSession):
        self.repository = JobRepository(db)

    async def list_jobs(self, status: Optional[str] = None) -> List[JobPosting]:
        """List jobs, newest first. "all" or no status means every job."""
        if status == ALL:
            status = None
        return await self.repository.list(status=status)

    async def get_job(self, job_id: int) -> Optional[JobPosting]:
        return await self.repository.get_by_id(job_id)

    async def create_job(self, data: JobCreate) -> JobPosting:
        """Create a job after checking required fields, the JD link and the role code."""
        reason = check_job_fields(data.model_dump())
        if reason:
            raise ValidationFailed(reason)

        if await self.repository.get_by_role_code(data.role_code):
            raise DuplicateEntry(
                f'Job data with Role Code "{data.role_code}" already exists. '
                "Please use a different Role Code.",
                {"role_code": data.role_code},
            )

        job = await self.repository.create(data)
        logger.info("Created job %s", job.role_code)
        return job

    async def update_job(self, job_id: int, data: JobUpdate) -> Optional[JobPosting]:
        """
        Update a job. Fields that are required on create cannot be blanked,
        and a new JD link must still be an http(s) URL.
        """
        changes = data.model_dump(exclude_unset=True)
        required = [(name, label) for name, label in JOB_REQUIRED_FIELDS if name in changes]
        reason = missing_field_reason(changes, required)
        if reason:
            raise ValidationFailed(reason)
        if "jd_url" in changes and not is_http_url(changes["jd_url"]):
            raise ValidationFailed(JD_URL_REASON)
        if "status" in changes and changes["status"] is None:
            raise ValidationFailed("Missing Status")

        return await self.repository.update(job_id, data)

    async def import_csv(self, text: str) -> IngestionResult[JobCreate]:
        """
        Bulk-create jobs from CSV text.

        Every row gets an outcome. Accepted rows are written in one batch;
        if no row is accepted the store is not touched.
        """
        document = read_csv(text, JOB_COLUMNS, JOB_REQUIRED_FIELDS)
        existing = await self.repository.list_role_codes()
        result = validate_job_rows(document, existing)

        if not result.accepted:
            raise NoValidRows(NO_VALID_ROWS, result.summary().model_dump())

        await self.repository.bulk_create(result.accepted)
        logger.info(
            "Job CSV import: %d inserted, %d invalid, %d duplicate",
            len(result.accepted),
            result.count(RowStatus.INVALID),
            result.count(RowStatus.DUPLICATE_IN_FILE, RowStatus.ALREADY_EXISTS),
        )
        return result
