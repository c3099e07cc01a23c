"""
Candidate application business logic service.
"""

import logging
import time
from functools import partial
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from recruitops.core.config import settings
from recruitops.errors import DuplicateEntry, NoValidRows, ValidationFailed
from recruitops.models.candidate_application import CandidateApplication
from recruitops.repositories.candidate_repository import CandidateRepository
from recruitops.repositories.job_repository import JobRepository
from recruitops.repositories.match_result_repository import MatchResultRepository
from recruitops.schemas.candidate import CandidateCreate, CandidateRecord, CandidateUpdate, GroupedCandidate
from recruitops.services.candidate_grouping import build_score_index, group_candidates_by_contact
from recruitops.services.csv_ingestion import (
    CANDIDATE_COLUMNS,
    CANDIDATE_REQUIRED_FIELDS,
    NO_VALID_ROWS,
    IngestionResult,
    RowStatus,
    missing_field_reason,
    read_csv,
    validate_candidate_rows,
)
from recruitops.utils.application_ids import generate_application_id, new_id_token

logger = logging.getLogger(__name__)


def duplicate_pair_message(contact_number: str, role_code: str) -> str:
    return (
        f'Candidate with Contact Number "{contact_number}" and Role Code "{role_code}" '
        "already exists. Entry skipped."
    )


class CandidateService:
    """Service for candidate application business logic."""

    def __init__(self, db: AsyncSession):
        self.repository = CandidateRepository(db)
        self.job_repository = JobRepository(db)
        self.match_repository = MatchResultRepository(db)

    async def list_candidates(self) -> List[CandidateApplication]:
        """All applications, newest first."""
        return await self.repository.list()

    async def get_candidate(self, candidate_id: int) -> Optional[CandidateApplication]:
        return await self.repository.get_by_id(candidate_id)

    async def create_candidate(self, data: CandidateCreate) -> CandidateApplication:
        """
        Create one application.

        Rejects a second application from the same contact number to the same
        role. The application ID is generated, and job_applied falls back to
        the role name of the matching job when the caller left it empty.
        """
        reason = missing_field_reason(data.model_dump(), CANDIDATE_REQUIRED_FIELDS)
        if reason:
            raise ValidationFailed(reason)

        if data.contact_number and data.role_code:
            if await self.repository.exists_pair(data.contact_number, data.role_code):
                raise DuplicateEntry(
                    duplicate_pair_message(data.contact_number, data.role_code),
                    {"contact_number": data.contact_number, "role_code": data.role_code},
                )

        values = data.model_dump()
        if data.role_code and not data.job_applied:
            job = await self.job_repository.get_by_role_code(data.role_code)
            if job and job.role_name:
                values["job_applied"] = job.role_name

        values["application_id"] = generate_application_id(
            data.role_code, prefix=settings.APPLICATION_ID_PREFIX
        )
        candidate = await self.repository.create(CandidateRecord(**values))
        logger.info("Created application %s", candidate.application_id)
        return candidate

    async def update_candidate(self, candidate_id: int, data: CandidateUpdate) -> Optional[CandidateApplication]:
        """Update an application, keeping (contact number, role code) unique."""
        current = await self.repository.get_by_id(candidate_id)
        if not current:
            return None

        changes = data.model_dump(exclude_unset=True)
        if "candidate_name" in changes:
            reason = missing_field_reason(changes, CANDIDATE_REQUIRED_FIELDS)
            if reason:
                raise ValidationFailed(reason)
        if "application_id" in changes and not changes["application_id"]:
            raise ValidationFailed("Missing Application ID")

        contact = changes.get("contact_number", current.contact_number)
        role_code = changes.get("role_code", current.role_code)
        pair_changed = (contact, role_code) != (current.contact_number, current.role_code)
        if pair_changed and contact and role_code:
            if await self.repository.exists_pair(contact, role_code):
                raise DuplicateEntry(
                    duplicate_pair_message(contact, role_code),
                    {"contact_number": contact, "role_code": role_code},
                )

        return await self.repository.update(candidate_id, data)

    async def import_csv(self, text: str) -> IngestionResult[CandidateRecord]:
        """
        Bulk-create applications from CSV text.

        Existing pairs and job names are read up front; accepted rows are
        written in one batch, and nothing is written if no row is accepted.
        """
        document = read_csv(text, CANDIDATE_COLUMNS, CANDIDATE_REQUIRED_FIELDS)
        existing_pairs = await self.repository.list_contact_role_pairs()
        role_names = await self.job_repository.role_names_by_code()

        make_id = partial(
            _bulk_application_id,
            prefix=settings.APPLICATION_ID_PREFIX,
            timestamp=int(time.time()),
            token=new_id_token(),
        )
        result = validate_candidate_rows(document, existing_pairs, role_names, make_id)

        if not result.accepted:
            raise NoValidRows(NO_VALID_ROWS, result.summary().model_dump())

        await self.repository.bulk_create(result.accepted)
        logger.info(
            "Candidate CSV import: %d inserted, %d invalid, %d duplicate",
            len(result.accepted),
            result.count(RowStatus.INVALID),
            result.count(RowStatus.DUPLICATE_IN_FILE, RowStatus.ALREADY_EXISTS),
        )
        return result

    async def grouped_candidates(self) -> List[GroupedCandidate]:
        """Applications grouped per contact number, with match scores joined in."""
        applications = await self.repository.list()
        scores = await self.match_repository.list_scores()
        return group_candidates_by_contact(
            applications,
            build_score_index(scores),
            count_applications=settings.COUNT_REPEAT_APPLICATIONS,
        )


def _bulk_application_id(role_code: Optional[str], counter: int, prefix: str, timestamp: int, token: str) -> str:
    return generate_application_id(role_code, prefix=prefix, counter=counter, timestamp=timestamp, token=token)
