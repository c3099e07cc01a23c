"""
Dashboard router - headline counters and screening analytics.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.core.dependencies import require_reader
from recruitops.db.session import get_db
from recruitops.schemas.dashboard import AnalyticsSummary, DashboardStats
from recruitops.services.analytics_service import AnalyticsService

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard/stats", response_model=DashboardStats, dependencies=[Depends(require_reader)])
async def get_dashboard_stats(db: AsyncSession = Depends(get_db)):
    service = AnalyticsService(db)
    return await service.dashboard_stats()


@router.get("/analytics", response_model=AnalyticsSummary, dependencies=[Depends(require_reader)])
async def get_analytics(db: AsyncSession = Depends(get_db)):
    """Screening analytics: average score, pass rate and outcome breakdown."""
    service = AnalyticsService(db)
    return await service.analytics_summary()
