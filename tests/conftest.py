"""
Pytest configuration and shared fixtures.
"""

import os
from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

from recruitops.core.dependencies import CurrentUser, get_current_user
from recruitops.db.session import get_db
from recruitops.models.candidate_application import CandidateApplication, JDMapping
from recruitops.models.job import JobPosting
from recruitops.models.screening_outcome import ScreeningOutcome

BASE_TIME = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)

_ids = count(1)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests, no external deps")
    config.addinivalue_line("markers", "db: requires database")
    config.addinivalue_line("markers", "server: requires running HTTP server")


def pytest_collection_modifyitems(config, items):
    run_db = os.environ.get("RUN_DB_TESTS") == "1"
    run_server = os.environ.get("RUN_SERVER_TESTS") == "1"

    skip_db = pytest.mark.skip(reason="db tests skipped by default; set RUN_DB_TESTS=1 to enable")
    skip_server = pytest.mark.skip(reason="server tests skipped by default; set RUN_SERVER_TESTS=1 to enable")

    for item in items:
        if "db" in item.keywords and not run_db:
            item.add_marker(skip_db)
        if "server" in item.keywords and not run_server:
            item.add_marker(skip_server)


def make_application(
    contact_number="9998887777",
    role_code="ENG-1",
    minutes=0,
    **fields,
) -> CandidateApplication:
    """Transient CandidateApplication; minutes offsets created_at from BASE_TIME."""
    record_id = fields.pop("id", next(_ids))
    values = {
        "application_id": f"AEX_{role_code or 'UNKNOWN'}_{1700000000 + record_id}",
        "candidate_name": "Asha Rao",
        "current_location": "Pune",
        "jd_mapping": JDMapping.NOT_STARTED,
    }
    values.update(fields)
    return CandidateApplication(
        id=record_id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        contact_number=contact_number,
        role_code=role_code,
        **values,
    )


def make_job(role_code="ENG-1", role_name="Backend Engineer", **fields) -> JobPosting:
    record_id = fields.pop("id", next(_ids))
    values = {
        "status": "active",
        "location": "Bengaluru",
        "jd_url": "https://files.example.com/jd/eng-1.pdf",
    }
    values.update(fields)
    return JobPosting(
        id=record_id,
        created_at=BASE_TIME,
        role_code=role_code,
        role_name=role_name,
        **values,
    )


def make_outcome(outcome, final_score=None, **fields) -> ScreeningOutcome:
    return ScreeningOutcome(
        id=next(_ids),
        created_at=BASE_TIME,
        screening_outcome=outcome,
        final_score=final_score,
        **fields,
    )


@pytest.fixture
def api_app():
    """The FastAPI app with the database session stubbed out and dependency overrides cleared afterwards."""
    from recruitops.main import app

    async def no_db():
        yield None

    app.dependency_overrides[get_db] = no_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def as_user(api_app):
    """Call as_user("admin") to make requests with that role."""

    def _as_user(*roles):
        async def current_user():
            return CurrentUser(user_id="user-1", roles=list(roles))

        api_app.dependency_overrides[get_current_user] = current_user

    return _as_user


@pytest.fixture
def client(api_app):
    from fastapi.testclient import TestClient

    return TestClient(api_app)
