"""
Job repository - database operations for JobPosting.
"""

from typing import Dict, List, Optional, Set

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.models.job import JobPosting
from recruitops.repositories.store_errors import store_operation
from recruitops.schemas.job import JobCreate, JobUpdate


class JobRepository:
    """Repository for JobPosting database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @store_operation("jobs.list")
    async def list(self, status: Optional[str] = None) -> List[JobPosting]:
        """List every job, newest first, optionally filtered by status."""
        query = select(JobPosting)

        if status is not None:
            query = query.where(JobPosting.status == status)

        query = query.order_by(JobPosting.created_at.desc(), JobPosting.id.desc())

        result = await self.db.execute(query)
        return list(result.scalars().all())

    @store_operation("jobs.get")
    async def get_by_id(self, job_id: int) -> Optional[JobPosting]:
        result = await self.db.execute(
            select(JobPosting).where(JobPosting.id == job_id)
        )
        return result.scalar_one_or_none()

    @store_operation("jobs.get_by_role_code")
    async def get_by_role_code(self, role_code: str) -> Optional[JobPosting]:
        result = await self.db.execute(
            select(JobPosting).where(JobPosting.role_code == role_code)
        )
        return result.scalar_one_or_none()

    @store_operation("jobs.role_codes")
    async def list_role_codes(self) -> Set[str]:
        """All role codes currently in the store."""
        result = await self.db.execute(select(JobPosting.role_code))
        return {code for code in result.scalars().all() if code is not None}

    @store_operation("jobs.role_names")
    async def role_names_by_code(self) -> Dict[str, str]:
        """Role code -> role name for jobs that have a name."""
        result = await self.db.execute(
            select(JobPosting.role_code, JobPosting.role_name)
        )
        return {code: name for code, name in result.all() if code and name}

    @store_operation("jobs.count")
    async def count(self) -> int:
        result = await self.db.execute(select(func.count(JobPosting.id)))
        return result.scalar_one()

    @store_operation("jobs.create")
    async def create(self, data: JobCreate) -> JobPosting:
        """Create a new job."""
        job = JobPosting(**data.model_dump())
        self.db.add(job)
        await self.db.flush()
        await self.db.refresh(job)
        return job

    @store_operation("jobs.bulk_create")
    async def bulk_create(self, items: List[JobCreate]) -> List[JobPosting]:
        """Insert a batch of jobs. Either every row is written or none is."""
        jobs = [JobPosting(**item.model_dump()) for item in items]
        async with self.db.begin_nested():
            self.db.add_all(jobs)
            await self.db.flush()
        return jobs

    @store_operation("jobs.update")
    async def update(self, job_id: int, data: JobUpdate) -> Optional[JobPosting]:
        """Update a job."""
        job = await self.get_by_id(job_id)
        if not job:
            return None

        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(job, field, value)

        await self.db.flush()
        await self.db.refresh(job)
        return job
