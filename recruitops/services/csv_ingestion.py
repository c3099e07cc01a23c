"""
CSV ingestion for bulk job and candidate uploads.

Turns uploaded text into typed rows, checks each row, and keeps a per-row
outcome so staff can download a report of what happened to every line.

Checks run in a fixed order and the first failure decides the row's status:
required fields, field format, duplicate within the file, duplicate in the
store.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Generic, List, Optional, Set, Tuple, TypeVar

from recruitops.errors import ValidationFailed
from recruitops.models.job import JobStatus
from recruitops.schemas.candidate import CandidateRecord
from recruitops.schemas.ingestion import ImportSummary, RowOutcomeRead
from recruitops.schemas.job import JobCreate
from recruitops.utils.csv_lines import parse_csv_line, split_data_lines
from recruitops.utils.url_validation import is_http_url

T = TypeVar("T")


class RowStatus(str, Enum):
    ACCEPTED = "ACCEPTED"
    INVALID = "INVALID"
    DUPLICATE_IN_FILE = "DUPLICATE_IN_FILE"
    ALREADY_EXISTS = "ALREADY_EXISTS"


STATUS_COLORS = {
    RowStatus.ACCEPTED: "GREEN",
    RowStatus.INVALID: "RED",
    RowStatus.DUPLICATE_IN_FILE: "YELLOW",
    RowStatus.ALREADY_EXISTS: "YELLOW",
}

ACCEPTED_REASON = "Successfully inserted"
JD_URL_REASON = "JD must be a valid file URL (http:// or https://)"
NO_VALID_ROWS = "No valid rows found to insert. All rows were skipped due to validation errors or duplicates."

# Header (lower-cased) -> JobCreate field
JOB_COLUMNS: Dict[str, str] = {
    "role code": "role_code",
    "role_code": "role_code",
    "role name": "role_name",
    "role_name": "role_name",
    "status": "status",
    "location": "location",
    "brief context about the role (jd)": "jd_url",
    "jd context": "jd_url",
    "jd_context": "jd_url",
    "current updates": "current_updates",
    "current_updates": "current_updates",
    "minimum experience": "minimum_experience",
    "minimum_experience": "minimum_experience",
    "duration": "duration",
    "candidate monthly ctc": "candidate_monthly_ctc",
    "candidate_monthly_ctc": "candidate_monthly_ctc",
    "skills": "skills",
}

# Header (lower-cased) -> CandidateCreate field. "application id" is
# recognized so it is not mistaken for an unknown column, but IDs are
# always generated here.
CANDIDATE_COLUMNS: Dict[str, Optional[str]] = {
    "application id": None,
    "role code": "role_code",
    "candidate name": "candidate_name",
    "candidate email id": "candidate_email",
    "candidate contact number": "contact_number",
    "candidate years of experience": "experience_years",
    "candidate relevant years of experience": "relevant_experience_years",
    "notice period": "notice_period",
    "current ctc": "current_ctc",
    "candidate salary expectation": "salary_expectation",
    "current location": "current_location",
    "candidate resume": "resume_url",
    "job applied": "job_applied",
    "skills": "skills",
    "documents": "documents",
}

# Required job fields in the order they are checked, with their display labels
JOB_REQUIRED_FIELDS: List[Tuple[str, str]] = [
    ("role_code", "Role Code"),
    ("role_name", "Role Name"),
    ("location", "Location"),
    ("jd_url", "Brief context about the role (JD)"),
]

CANDIDATE_REQUIRED_FIELDS: List[Tuple[str, str]] = [
    ("candidate_name", "Candidate Name"),
]


@dataclass
class CsvRow:
    """One data line of an upload, before any checks."""

    row_number: int
    line: str
    values: List[str]
    # Mapped field -> trimmed non-empty cell value
    fields: Dict[str, str]


@dataclass
class CsvDocument:
    headers: List[str]
    rows: List[CsvRow]


@dataclass
class RowOutcome:
    row: CsvRow
    status: RowStatus
    reason: Optional[str] = None


@dataclass
class IngestionResult(Generic[T]):
    """Accepted records plus one outcome per data line, in file order."""

    headers: List[str]
    accepted: List[T] = field(default_factory=list)
    outcomes: List[RowOutcome] = field(default_factory=list)

    def count(self, *statuses: RowStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status in statuses)

    def summary(self) -> ImportSummary:
        return ImportSummary(
            inserted=len(self.accepted),
            invalid=self.count(RowStatus.INVALID),
            duplicates=self.count(RowStatus.DUPLICATE_IN_FILE, RowStatus.ALREADY_EXISTS),
            rows=[
                RowOutcomeRead(
                    row_number=outcome.row.row_number,
                    status=outcome.status.value,
                    reason=outcome.reason,
                )
                for outcome in self.outcomes
            ],
        )


def read_csv(
    text: str,
    columns: Dict[str, Optional[str]],
    required: Optional[List[Tuple[str, str]]] = None,
) -> CsvDocument:
    """Parse upload text with a header row into mapped rows.

    Header names are matched case-insensitively; unknown headers are ignored
    and empty cells are left out of the row's fields. A required field with
    no matching header rejects the whole file. Row numbers count data lines
    from 1, skipping blank lines.
    """
    lines = split_data_lines(text)
    if not lines:
        raise ValidationFailed("CSV file is empty")

    headers = parse_csv_line(lines[0])
    keys = [header.lower() for header in headers]
    mapped = {columns.get(key) for key in keys}
    absent = [label for name, label in required or [] if name not in mapped]
    if absent:
        raise ValidationFailed(
            f"CSV is missing required column(s): {', '.join(absent)}",
            {"headers": headers},
        )

    rows = []
    for row_number, line in enumerate(lines[1:], start=1):
        values = parse_csv_line(line)
        fields: Dict[str, str] = {}
        for idx, key in enumerate(keys):
            target = columns.get(key)
            if target and idx < len(values) and values[idx]:
                fields[target] = values[idx]
        rows.append(CsvRow(row_number=row_number, line=line, values=values, fields=fields))

    return CsvDocument(headers=headers, rows=rows)


def missing_field_reason(fields: Dict[str, Optional[str]], required: List[Tuple[str, str]]) -> Optional[str]:
    for name, label in required:
        value = fields.get(name)
        if value is None or not str(value).strip():
            return f"Missing {label}"
    return None


def normalize_job_fields(fields: Dict[str, str]) -> Dict[str, str]:
    """Copy of a job row with its status trimmed and lower-cased."""
    normalized = dict(fields)
    if normalized.get("status"):
        normalized["status"] = normalized["status"].strip().lower()
    return normalized


def check_job_fields(fields: Dict[str, Optional[str]]) -> Optional[str]:
    """First problem with a job's required fields or formats, or None.

    Status is compared case-insensitively, so "Active" passes.
    """
    reason = missing_field_reason(fields, JOB_REQUIRED_FIELDS)
    if reason:
        return reason

    if not is_http_url(fields["jd_url"]):
        return JD_URL_REASON

    status = (fields.get("status") or "").strip()
    if status and status.lower() not in JobStatus.ALL:
        return f'Invalid Status "{status}" (expected one of: {", ".join(JobStatus.ALL)})'

    return None


def validate_job_rows(document: CsvDocument, existing_role_codes: Set[str]) -> IngestionResult[JobCreate]:
    """Check job rows against each other and against role codes already stored."""
    result: IngestionResult[JobCreate] = IngestionResult(headers=document.headers)
    accepted_codes: Set[str] = set()

    for row in document.rows:
        fields = normalize_job_fields(row.fields)
        reason = check_job_fields(fields)
        if reason:
            result.outcomes.append(RowOutcome(row, RowStatus.INVALID, reason))
            continue

        role_code = fields["role_code"]
        if role_code in accepted_codes:
            result.outcomes.append(RowOutcome(
                row,
                RowStatus.DUPLICATE_IN_FILE,
                f'Role Code "{role_code}" already exists in this CSV file',
            ))
            continue

        if role_code in existing_role_codes:
            result.outcomes.append(RowOutcome(
                row,
                RowStatus.ALREADY_EXISTS,
                f'Role Code "{role_code}" already exists in database',
            ))
            continue

        accepted_codes.add(role_code)
        result.accepted.append(JobCreate(**fields))
        result.outcomes.append(RowOutcome(row, RowStatus.ACCEPTED))

    return result


def validate_candidate_rows(
    document: CsvDocument,
    existing_pairs: Set[Tuple[str, str]],
    role_names: Dict[str, str],
    make_application_id: Callable[[Optional[str], int], str],
) -> IngestionResult[CandidateRecord]:
    """Check candidate rows and prepare the accepted ones for insertion.

    The (contact number, role code) pair is only checked when both are given.
    Accepted rows get a generated application ID and, when the role code
    belongs to a known job, that job's role name as job_applied.
    """
    result: IngestionResult[CandidateRecord] = IngestionResult(headers=document.headers)
    accepted_pairs: Set[Tuple[str, str]] = set()

    for row in document.rows:
        reason = missing_field_reason(row.fields, CANDIDATE_REQUIRED_FIELDS)
        if reason:
            result.outcomes.append(RowOutcome(row, RowStatus.INVALID, reason))
            continue

        contact = row.fields.get("contact_number")
        role_code = row.fields.get("role_code")
        pair = (contact, role_code) if contact and role_code else None

        if pair and pair in accepted_pairs:
            result.outcomes.append(RowOutcome(
                row,
                RowStatus.DUPLICATE_IN_FILE,
                f'Contact Number "{contact}" and Role Code "{role_code}" already exist in this CSV file',
            ))
            continue

        if pair and pair in existing_pairs:
            result.outcomes.append(RowOutcome(
                row,
                RowStatus.ALREADY_EXISTS,
                f'Contact Number "{contact}" and Role Code "{role_code}" already exist in database',
            ))
            continue

        if pair:
            accepted_pairs.add(pair)

        values = dict(row.fields)
        if role_code and role_names.get(role_code):
            values["job_applied"] = role_names[role_code]
        values["application_id"] = make_application_id(role_code, row.row_number - 1)

        result.accepted.append(CandidateRecord(**values))
        result.outcomes.append(RowOutcome(row, RowStatus.ACCEPTED))

    return result


def build_result_csv(result: IngestionResult) -> str:
    """Render the per-row report: row number, status with color, reason, then the original cells."""
    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(["Row Number", "Status", "Reason", *result.headers])

    for outcome in result.outcomes:
        writer.writerow([
            outcome.row.row_number,
            f"{outcome.status.value} ({STATUS_COLORS[outcome.status]})",
            outcome.reason or ACCEPTED_REASON,
            *outcome.row.values,
        ])

    return output.getvalue()
