"""
CSV import result schemas.
"""

from typing import List, Optional

from pydantic import BaseModel


class RowOutcomeRead(BaseModel):
    """Outcome of one data line of an uploaded CSV."""

    row_number: int
    status: str
    reason: Optional[str] = None


class ImportSummary(BaseModel):
    """What a CSV import did, row by row."""

    inserted: int
    invalid: int
    duplicates: int
    rows: List[RowOutcomeRead]
