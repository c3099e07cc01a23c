"""
FastAPI dependencies for the application.
"""

from typing import List

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.core.permissions import Roles, raise_if_not_roles
from recruitops.db.session import get_db
from recruitops.repositories.user_role_repository import UserRoleRepository


class CurrentUser:
    """The caller identified by X-User-ID, with its assigned roles."""

    def __init__(self, user_id: str, roles: List[str]):
        self.user_id = user_id
        self.roles = roles


async def get_user_id(x_user_id: str = Header(None)) -> str:
    """
    Extract the caller's user ID from the X-User-ID header.

    Session handling lives upstream; this service only trusts the header.
    Raises 401 if it is missing.
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-User-ID header is required",
        )
    return x_user_id


async def get_current_user(
    user_id: str = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
) -> CurrentUser:
    """Load the caller's role assignments."""
    repository = UserRoleRepository(db)
    roles = await repository.list_roles(user_id)
    return CurrentUser(user_id=user_id, roles=roles)


def require_roles(*allowed_roles: str):
    """
    Dependency factory to require specific roles.

    Usage:
        @router.post("", dependencies=[Depends(require_roles(*Roles.WRITE))])
        async def create_job(...):
            ...
    """
    async def check_role(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        raise_if_not_roles(user.roles, list(allowed_roles))
        return user

    return check_role


require_reader = require_roles(*Roles.READ)
require_writer = require_roles(*Roles.WRITE)
