"""
Screening router - screening call outcomes.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.core.dependencies import require_reader
from recruitops.db.session import get_db
from recruitops.schemas.screening import ScreeningOutcomeRead
from recruitops.services.screening_service import ScreeningService

router = APIRouter(prefix="/screening", tags=["screening"])


@router.get("", response_model=List[ScreeningOutcomeRead], dependencies=[Depends(require_reader)])
async def list_screening_outcomes(db: AsyncSession = Depends(get_db)):
    """Screening calls, most recent first."""
    service = ScreeningService(db)
    return await service.list_outcomes()
