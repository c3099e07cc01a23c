"""
User role repository - role assignments used for permission checks.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.models.user_role import UserRole
from recruitops.repositories.store_errors import store_operation


class UserRoleRepository:
    """Repository for UserRole database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @store_operation("user_roles.list")
    async def list_roles(self, user_id: str) -> List[str]:
        """Role names assigned to a user."""
        result = await self.db.execute(
            select(UserRole.role).where(UserRole.user_id == user_id)
        )
        return list(result.scalars().all())
