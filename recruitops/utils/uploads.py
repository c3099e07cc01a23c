"""
Helpers for CSV uploads and CSV report downloads.
"""

import time
from typing import Optional

from fastapi import UploadFile
from fastapi.responses import StreamingResponse

from recruitops.errors import ValidationFailed


async def read_upload_text(upload: UploadFile, max_bytes: int) -> str:
    """Read an uploaded .csv file as text. A UTF-8 byte-order mark is dropped."""
    filename = upload.filename or ""
    if not filename.lower().endswith(".csv"):
        raise ValidationFailed("Please upload a .csv file", {"filename": filename})

    content = await upload.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise ValidationFailed(
            "CSV file is too large",
            {"filename": filename, "max_bytes": max_bytes},
        )

    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise ValidationFailed("CSV file must be UTF-8 encoded", {"filename": filename})


def result_filename(kind: str, now_ms: Optional[int] = None) -> str:
    """job_upload_result_<epoch ms>.csv style name for a report download."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{kind}_upload_result_{now_ms}.csv"


def csv_attachment(payload: str, filename: str) -> StreamingResponse:
    return StreamingResponse(
        iter([payload]),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
