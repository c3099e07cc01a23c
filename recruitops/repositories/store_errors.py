"""
Translation of database failures into StoreError.

Every repository method that talks to the database is wrapped so callers see
one structured error type carrying the database's own message.
"""

import functools
import logging

from sqlalchemy.exc import SQLAlchemyError

from recruitops.errors import StoreError

logger = logging.getLogger(__name__)


def store_message(exc: SQLAlchemyError) -> str:
    """The underlying driver message when there is one, else SQLAlchemy's."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def store_operation(name: str):
    """Decorator for async repository methods: SQLAlchemyError -> StoreError."""

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except SQLAlchemyError as exc:
                message = store_message(exc)
                logger.error("Store operation %s failed: %s", name, message)
                raise StoreError(message, operation=name) from exc

        return wrapper

    return decorator
