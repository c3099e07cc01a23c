"""
Base model with common fields.

Every record collection inherits from this to get:
- id (integer primary key)
- created_at (when the record was created)
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from recruitops.db.base import Base


class RecordModel(Base):
    """
    Abstract base class for all stored records.

    This is not a real table - it's a template that other models inherit from.
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # Set by the database on insert; grouping and listings order by it
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )
