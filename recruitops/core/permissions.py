"""
Role-based permission helpers for the recruiting console.

Defines roles and the checks routers use to enforce them.
"""

from typing import List
from fastapi import HTTPException, status


class Roles:
    """Standard roles stored in the user_roles collection."""
    ADMIN = "admin"
    RECRUITER = "recruiter"
    VIEWER = "viewer"

    ALL = [ADMIN, RECRUITER, VIEWER]

    # Role capabilities matrix
    # admin: Full access to everything
    # recruiter: Manage jobs, candidates, CV mapping and screening queue
    # viewer: Read-only access
    READ = ALL
    WRITE = [ADMIN, RECRUITER]


def check_role_permission(user_roles: List[str], allowed_roles: List[str]) -> bool:
    """
    Check if any of the user's roles is in the list of allowed roles.

    Args:
        user_roles: Roles assigned to the user
        allowed_roles: List of roles that are permitted

    Returns:
        True if user has permission, False otherwise
    """
    if not user_roles or not allowed_roles:
        return False
    return any(role in allowed_roles for role in user_roles)


def raise_if_no_roles(user_roles: List[str]) -> None:
    """Raise 403 when the user has no role assignment at all."""
    if not user_roles:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You need an 'admin' role to view this data. Please contact your administrator.",
        )


def raise_if_not_roles(user_roles: List[str], allowed_roles: List[str], action: str = "perform this action") -> None:
    """
    Raise 403 error if user doesn't have one of the allowed roles.

    Raises:
        HTTPException: 403 if user doesn't have permission
    """
    raise_if_no_roles(user_roles)
    if not check_role_permission(user_roles, allowed_roles):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Insufficient permissions to {action}. Required: {', '.join(allowed_roles)}"
        )
