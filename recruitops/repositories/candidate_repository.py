"""
Candidate repository - database operations for CandidateApplication.
"""

from typing import List, Optional, Set, Tuple

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.models.candidate_application import CandidateApplication
from recruitops.repositories.store_errors import store_operation
from recruitops.schemas.candidate import CandidateRecord, CandidateUpdate


class CandidateRepository:
    """Repository for CandidateApplication database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @store_operation("candidates.list")
    async def list(self, jd_mapping: Optional[str] = None) -> List[CandidateApplication]:
        """List applications newest first, optionally by JD mapping state."""
        query = select(CandidateApplication)

        if jd_mapping is not None:
            query = query.where(CandidateApplication.jd_mapping == jd_mapping)

        query = query.order_by(
            CandidateApplication.created_at.desc(),
            CandidateApplication.id.desc(),
        )

        result = await self.db.execute(query)
        return list(result.scalars().all())

    @store_operation("candidates.get")
    async def get_by_id(self, candidate_id: int) -> Optional[CandidateApplication]:
        result = await self.db.execute(
            select(CandidateApplication).where(CandidateApplication.id == candidate_id)
        )
        return result.scalar_one_or_none()

    @store_operation("candidates.list_by_ids")
    async def list_by_ids(self, candidate_ids: List[int]) -> List[CandidateApplication]:
        result = await self.db.execute(
            select(CandidateApplication).where(CandidateApplication.id.in_(candidate_ids))
        )
        return list(result.scalars().all())

    @store_operation("candidates.exists_pair")
    async def exists_pair(self, contact_number: str, role_code: str) -> bool:
        """True when an application with this contact number and role code exists."""
        result = await self.db.execute(
            select(CandidateApplication.id).where(
                CandidateApplication.contact_number == contact_number,
                CandidateApplication.role_code == role_code,
            ).limit(1)
        )
        return result.scalar_one_or_none() is not None

    @store_operation("candidates.contact_role_pairs")
    async def list_contact_role_pairs(self) -> Set[Tuple[str, str]]:
        """Every (contact number, role code) pair in the store, trimmed."""
        result = await self.db.execute(
            select(CandidateApplication.contact_number, CandidateApplication.role_code)
        )
        pairs = set()
        for contact, role_code in result.all():
            contact = (contact or "").strip()
            role_code = (role_code or "").strip()
            if contact and role_code:
                pairs.add((contact, role_code))
        return pairs

    @store_operation("candidates.count")
    async def count(self) -> int:
        result = await self.db.execute(select(func.count(CandidateApplication.id)))
        return result.scalar_one()

    @store_operation("candidates.create")
    async def create(self, data: CandidateRecord) -> CandidateApplication:
        """Create a new candidate application."""
        candidate = CandidateApplication(**data.model_dump())
        self.db.add(candidate)
        await self.db.flush()
        await self.db.refresh(candidate)
        return candidate

    @store_operation("candidates.bulk_create")
    async def bulk_create(self, items: List[CandidateRecord]) -> List[CandidateApplication]:
        """Insert a batch of applications. Either every row is written or none is."""
        candidates = [CandidateApplication(**item.model_dump()) for item in items]
        async with self.db.begin_nested():
            self.db.add_all(candidates)
            await self.db.flush()
        return candidates

    @store_operation("candidates.update")
    async def update(self, candidate_id: int, data: CandidateUpdate) -> Optional[CandidateApplication]:
        """Update a candidate application."""
        candidate = await self.get_by_id(candidate_id)
        if not candidate:
            return None

        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(candidate, field, value)

        await self.db.flush()
        await self.db.refresh(candidate)
        return candidate

    @store_operation("candidates.set_jd_mapping")
    async def set_jd_mapping(self, candidate_ids: List[int], value: str) -> int:
        """Set the JD mapping tag on the given applications. Returns rows touched."""
        result = await self.db.execute(
            update(CandidateApplication)
            .where(CandidateApplication.id.in_(candidate_ids))
            .values(jd_mapping=value)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0
