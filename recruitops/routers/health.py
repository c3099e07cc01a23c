"""Health check router."""

import logging
from pathlib import Path
from typing import Optional

from alembic.config import Config
from alembic.script import ScriptDirectory
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class HealthStatus(BaseModel):
    api_ok: bool = True
    db_ok: bool = False
    schema_current: bool = False
    alembic_current: Optional[str] = None
    alembic_head: Optional[str] = None


def load_alembic_head(project_root: Path = PROJECT_ROOT) -> Optional[str]:
    """Newest migration revision shipped with the code, or None outside a checkout."""
    cfg_path = project_root / "alembic.ini"
    script_location = project_root / "alembic"
    if not cfg_path.exists() or not script_location.exists():
        return None

    config = Config(str(cfg_path))
    config.set_main_option("script_location", str(script_location))
    return ScriptDirectory.from_config(config).get_current_head()


@router.get("/health", response_model=HealthStatus)
async def health_check(db: AsyncSession = Depends(get_db)):
    """Report database reachability and whether migrations are up to date."""
    health = HealthStatus(alembic_head=load_alembic_head())

    try:
        await db.execute(text("SELECT 1"))
        health.db_ok = True
        version = await db.execute(text("SELECT version_num FROM alembic_version"))
        health.alembic_current = version.scalar_one_or_none()
    except SQLAlchemyError as exc:
        logger.warning("Health check query failed: %s", exc)
        await db.rollback()

    health.schema_current = bool(
        health.alembic_current and health.alembic_current == health.alembic_head
    )
    return health
