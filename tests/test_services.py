"""
Service tests with in-memory repositories standing in for the database.
"""

import pytest

from conftest import make_application, make_job
from recruitops.errors import DuplicateEntry, NoValidRows, ValidationFailed
from recruitops.models.candidate_application import JDMapping
from recruitops.models.screening_outcome import QueueStatus
from recruitops.schemas.candidate import CandidateCreate, CandidateUpdate
from recruitops.schemas.job import JobCreate, JobUpdate
from recruitops.services.candidate_service import CandidateService
from recruitops.services.cv_mapping_service import CVMappingService
from recruitops.services.filters import FilterState
from recruitops.services.job_service import JobService


class FakeJobRepository:
    def __init__(self, jobs=()):
        self.jobs = list(jobs)
        self.created = []
        self.bulk_calls = 0

    async def list(self, status=None):
        return [j for j in self.jobs if status is None or j.status == status]

    async def get_by_role_code(self, role_code):
        return next((j for j in self.jobs if j.role_code == role_code), None)

    async def list_role_codes(self):
        return {j.role_code for j in self.jobs}

    async def role_names_by_code(self):
        return {j.role_code: j.role_name for j in self.jobs if j.role_name}

    async def create(self, data):
        job = make_job(**data.model_dump())
        self.created.append(job)
        return job

    async def bulk_create(self, items):
        self.bulk_calls += 1
        jobs = [make_job(**item.model_dump()) for item in items]
        self.created.extend(jobs)
        return jobs

    async def get_by_id(self, job_id):
        return next((j for j in self.jobs if j.id == job_id), None)

    async def update(self, job_id, data):
        job = await self.get_by_id(job_id)
        if job:
            for field, value in data.model_dump(exclude_unset=True).items():
                setattr(job, field, value)
        return job


class FakeCandidateRepository:
    def __init__(self, candidates=()):
        self.candidates = list(candidates)
        self.created = []
        self.mapping_updates = []

    async def list(self, jd_mapping=None):
        return [c for c in self.candidates if jd_mapping is None or c.jd_mapping == jd_mapping]

    async def get_by_id(self, candidate_id):
        return next((c for c in self.candidates if c.id == candidate_id), None)

    async def list_by_ids(self, candidate_ids):
        return [c for c in self.candidates if c.id in candidate_ids]

    async def exists_pair(self, contact_number, role_code):
        return any(
            c.contact_number == contact_number and c.role_code == role_code
            for c in self.candidates
        )

    async def list_contact_role_pairs(self):
        return {(c.contact_number, c.role_code) for c in self.candidates if c.contact_number and c.role_code}

    async def create(self, data):
        self.created.append(data)
        return make_application(**data.model_dump())

    async def bulk_create(self, items):
        self.created.extend(items)
        return items

    async def update(self, candidate_id, data):
        candidate = await self.get_by_id(candidate_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(candidate, field, value)
        return candidate

    async def set_jd_mapping(self, candidate_ids, value):
        self.mapping_updates.append((list(candidate_ids), value))
        return len(candidate_ids)


class FakeMatchRepository:
    def __init__(self, scores=()):
        self.scores = list(scores)

    async def list_scores(self):
        return self.scores


class FakeScreeningRepository:
    def __init__(self):
        self.queued = []

    async def enqueue(self, entries):
        self.queued.extend(entries)
        return entries


JD = "https://files.example.com/jd.pdf"


def job_service(jobs=()):
    service = JobService(db=None)
    service.repository = FakeJobRepository(jobs)
    return service


def candidate_service(candidates=(), jobs=(), scores=()):
    service = CandidateService(db=None)
    service.repository = FakeCandidateRepository(candidates)
    service.job_repository = FakeJobRepository(jobs)
    service.match_repository = FakeMatchRepository(scores)
    return service


# Jobs

@pytest.mark.asyncio
async def test_create_job_rejects_existing_role_code():
    service = job_service([make_job("ENG-1")])

    with pytest.raises(DuplicateEntry) as excinfo:
        await service.create_job(JobCreate(role_code="ENG-1", role_name="X", location="Pune", jd_url=JD))

    assert excinfo.value.message == (
        'Job data with Role Code "ENG-1" already exists. Please use a different Role Code.'
    )
    assert excinfo.value.status_code == 409


@pytest.mark.asyncio
async def test_create_job_checks_jd_link():
    service = job_service()
    with pytest.raises(ValidationFailed) as excinfo:
        await service.create_job(
            JobCreate(role_code="ENG-2", role_name="X", location="Pune", jd_url="ftp://x.com/jd.pdf")
        )
    assert "http://" in excinfo.value.message
    assert service.repository.created == []


@pytest.mark.asyncio
async def test_create_job_requires_role_name():
    service = job_service()
    with pytest.raises(ValidationFailed) as excinfo:
        await service.create_job(JobCreate(role_code="ENG-2", location="Pune", jd_url=JD))
    assert excinfo.value.message == "Missing Role Name"


@pytest.mark.asyncio
async def test_update_job_cannot_blank_required_field():
    service = job_service([make_job("ENG-1", id=7)])
    with pytest.raises(ValidationFailed):
        await service.update_job(7, JobUpdate(location="  "))


@pytest.mark.asyncio
async def test_update_job_changes_status():
    service = job_service([make_job("ENG-1", id=8)])
    job = await service.update_job(8, JobUpdate(status="paused"))
    assert job.status == "paused"
    assert job.role_code == "ENG-1"


@pytest.mark.asyncio
async def test_list_jobs_all_means_no_filter():
    service = job_service([make_job("ENG-1"), make_job("ENG-2", status="closed")])
    assert len(await service.list_jobs("all")) == 2
    assert [j.role_code for j in await service.list_jobs("closed")] == ["ENG-2"]


@pytest.mark.asyncio
async def test_job_import_writes_accepted_rows_in_one_batch():
    service = job_service([make_job("ENG-9")])
    text = "\n".join([
        "Role Code,Role Name,Location,JD Context",
        f"ENG-1,Backend,Pune,{JD}",
        f"ENG-1,Backend,Pune,{JD}",
        f"ENG-9,Data,Pune,{JD}",
    ])

    result = await service.import_csv(text)

    assert service.repository.bulk_calls == 1
    assert [j.role_code for j in service.repository.created] == ["ENG-1"]
    assert result.summary().duplicates == 2


@pytest.mark.asyncio
async def test_job_import_with_nothing_valid_skips_the_store():
    service = job_service()
    text = "Role Code,Role Name,Location,JD Context\nENG-1,,Pune,ftp://x/jd.pdf"

    with pytest.raises(NoValidRows) as excinfo:
        await service.import_csv(text)

    assert service.repository.bulk_calls == 0
    assert excinfo.value.payload["error"]["details"]["invalid"] == 1


# Candidates

@pytest.mark.asyncio
async def test_create_candidate_rejects_existing_pair_but_allows_other_role():
    service = candidate_service(
        candidates=[make_application("9998887777", "ENG-1")],
        jobs=[make_job("ENG-2", "Platform Engineer")],
    )

    with pytest.raises(DuplicateEntry) as excinfo:
        await service.create_candidate(
            CandidateCreate(candidate_name="Asha", contact_number="9998887777", role_code="ENG-1")
        )
    assert excinfo.value.message == (
        'Candidate with Contact Number "9998887777" and Role Code "ENG-1" already exists. Entry skipped.'
    )

    created = await service.create_candidate(
        CandidateCreate(candidate_name="Asha", contact_number="9998887777", role_code="ENG-2")
    )
    assert created.job_applied == "Platform Engineer"
    assert created.application_id.startswith("AEX_ENG-2_")


@pytest.mark.asyncio
async def test_create_candidate_requires_name():
    service = candidate_service()
    with pytest.raises(ValidationFailed) as excinfo:
        await service.create_candidate(CandidateCreate(contact_number="1", role_code="ENG-1"))
    assert excinfo.value.message == "Missing Candidate Name"


@pytest.mark.asyncio
async def test_update_candidate_to_taken_pair_is_rejected():
    service = candidate_service(candidates=[
        make_application("111", "ENG-1", id=1),
        make_application("111", "ENG-2", id=2),
    ])
    with pytest.raises(DuplicateEntry):
        await service.update_candidate(2, CandidateUpdate(role_code="ENG-1"))

    updated = await service.update_candidate(2, CandidateUpdate(notice_period="30 days"))
    assert updated.notice_period == "30 days"


@pytest.mark.asyncio
async def test_update_missing_candidate_returns_none():
    service = candidate_service()
    assert await service.update_candidate(404, CandidateUpdate(notice_period="x")) is None


@pytest.mark.asyncio
async def test_candidate_import_generates_ids_per_row():
    service = candidate_service(
        candidates=[make_application("9998887777", "ENG-1")],
        jobs=[make_job("ENG-2", "Platform Engineer")],
    )
    text = "\n".join([
        "Role Code,Candidate Name,Candidate Contact Number",
        "ENG-1,Asha,9998887777",
        "ENG-2,Asha,9998887777",
        "ENG-2,Ravi,8887776666",
    ])

    result = await service.import_csv(text)

    ids = [c.application_id for c in service.repository.created]
    assert len(ids) == 2 and len(set(ids)) == 2
    assert ids[0].endswith("_1") and ids[1].endswith("_2")
    assert all(c.job_applied == "Platform Engineer" for c in service.repository.created)
    assert result.summary().duplicates == 1


@pytest.mark.asyncio
async def test_grouped_candidates_joins_scores():
    service = candidate_service(
        candidates=[
            make_application("111", "A", minutes=0, application_id="APP-A"),
            make_application("111", "B", minutes=10, application_id="APP-B"),
        ],
        scores=[("APP-A", "A", "64")],
    )
    groups = await service.grouped_candidates()
    assert groups[0].last_applied_roles == ["A: 64, Null"]


# CV mapping

def mapping_service(candidates=(), scores=()):
    service = CVMappingService(db=None)
    service.repository = FakeCandidateRepository(candidates)
    service.match_repository = FakeMatchRepository(scores)
    service.screening_repository = FakeScreeningRepository()
    return service


@pytest.mark.asyncio
async def test_start_mapping_requires_selection():
    service = mapping_service()
    with pytest.raises(ValidationFailed) as excinfo:
        await service.start_mapping([])
    assert excinfo.value.message == "Please select at least one candidate"


@pytest.mark.asyncio
async def test_start_mapping_tags_selected_candidates():
    service = mapping_service()
    result = await service.start_mapping([3, 4])
    assert result.updated == 2
    assert service.repository.mapping_updates == [([3, 4], JDMapping.STARTED)]


@pytest.mark.asyncio
async def test_screening_ready_candidates_get_latest_score_and_filters():
    service = mapping_service(
        candidates=[
            make_application("1", "ENG-1", application_id="APP-1", jd_mapping=JDMapping.DONE),
            make_application("2", "ENG-1", application_id="APP-2", jd_mapping=JDMapping.DONE),
            make_application("3", "ENG-2", application_id="APP-3", jd_mapping=JDMapping.DONE),
            make_application("4", "ENG-1", application_id="APP-4", jd_mapping=JDMapping.STARTED),
        ],
        scores=[("APP-1", "ENG-1", "40"), ("APP-1", "ENG-1", "85"), ("APP-2", "ENG-1", "")],
    )

    items, total = await service.list_screening_ready(FilterState())
    assert total == 3
    assert {i.application_id: i.score for i in items} == {"APP-1": "85", "APP-2": None, "APP-3": None}

    items, total = await service.list_screening_ready(FilterState(role_code="ENG-1", score_min=80))
    assert [i.application_id for i in items] == ["APP-1"]
    assert total == 3


@pytest.mark.asyncio
async def test_start_screening_queues_selected_candidates():
    service = mapping_service(candidates=[
        make_application("1", "ENG-1", id=11, application_id="APP-11"),
        make_application("2", "ENG-2", id=12, application_id="APP-12"),
    ])

    result = await service.start_screening([11, 12])

    assert result.updated == 2
    queued = service.screening_repository.queued
    assert [(q.application_id, q.role_code, q.status) for q in queued] == [
        ("APP-11", "ENG-1", QueueStatus.QUEUED),
        ("APP-12", "ENG-2", QueueStatus.QUEUED),
    ]


@pytest.mark.asyncio
async def test_start_screening_requires_selection():
    service = mapping_service()
    with pytest.raises(ValidationFailed):
        await service.start_screening([])


@pytest.mark.asyncio
async def test_unknown_jd_mapping_filter_is_rejected():
    service = mapping_service()
    with pytest.raises(ValidationFailed):
        await service.list_screening_ready(FilterState(jd_mapping="SOMETIMES"))


@pytest.mark.asyncio
async def test_back_to_back_creates_get_distinct_application_ids():
    service = candidate_service()

    first = await service.create_candidate(
        CandidateCreate(candidate_name="Asha", contact_number="111", role_code="ENG-1")
    )
    second = await service.create_candidate(
        CandidateCreate(candidate_name="Ravi", contact_number="222", role_code="ENG-1")
    )

    assert first.application_id != second.application_id


@pytest.mark.asyncio
async def test_two_imports_of_the_same_role_get_distinct_application_ids():
    text = "Role Code,Candidate Name,Candidate Contact Number\nENG-1,Asha,111"

    first = candidate_service()
    await first.import_csv(text)
    second = candidate_service()
    await second.import_csv(text)

    first_id = first.repository.created[0].application_id
    second_id = second.repository.created[0].application_id
    assert first_id.endswith("_0") and second_id.endswith("_0")
    assert first_id != second_id
