"""
HTTP API tests. The database session is stubbed and repository methods are
patched, so these run without PostgreSQL.
"""

import pytest

from conftest import make_application, make_job
from recruitops.errors import StoreError
from recruitops.repositories.candidate_repository import CandidateRepository
from recruitops.repositories.job_repository import JobRepository
from recruitops.repositories.match_result_repository import MatchResultRepository
from recruitops.repositories.screening_repository import ScreeningRepository
from recruitops.repositories.stats_repository import StatsRepository

JD = "https://files.example.com/jd.pdf"
JOB_CSV = "\n".join([
    "Role Code,Role Name,Location,Brief context about the role (JD)",
    f"ENG-1,Backend,Pune,{JD}",
    f"ENG-1,Backend,Pune,{JD}",
    "ENG-2,Backend,Pune,ftp://x.com/jd.pdf",
])


def patch_async(monkeypatch, cls, name, result=None, calls=None):
    async def fake(self, *args, **kwargs):
        if calls is not None:
            calls.append((args, kwargs))
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(cls, name, fake)


@pytest.mark.unit
def test_missing_user_header_is_401(client):
    response = client.get("/jobs")
    assert response.status_code == 401


@pytest.mark.unit
def test_user_without_roles_gets_admin_guidance(client, as_user):
    as_user()
    response = client.get("/jobs")
    assert response.status_code == 403
    assert "admin" in response.json()["detail"]


@pytest.mark.unit
def test_viewer_cannot_write(client, as_user):
    as_user("viewer")
    response = client.post("/jobs", json={"role_code": "ENG-1"})
    assert response.status_code == 403


@pytest.mark.unit
def test_list_jobs(client, as_user, monkeypatch):
    as_user("viewer")
    calls = []
    patch_async(monkeypatch, JobRepository, "list", [make_job("ENG-1", id=1)], calls)

    response = client.get("/jobs", params={"status": "active"})

    assert response.status_code == 200
    assert response.json()[0]["role_code"] == "ENG-1"
    assert calls[0][1] == {"status": "active"}


@pytest.mark.unit
def test_get_missing_job_is_404(client, as_user, monkeypatch):
    as_user("viewer")
    patch_async(monkeypatch, JobRepository, "get_by_id", None)
    assert client.get("/jobs/99").status_code == 404


@pytest.mark.unit
def test_create_job_duplicate_is_409_envelope(client, as_user, monkeypatch):
    as_user("recruiter")
    patch_async(monkeypatch, JobRepository, "get_by_role_code", make_job("ENG-1"))

    response = client.post(
        "/jobs",
        json={"role_code": "ENG-1", "role_name": "Backend", "location": "Pune", "jd_url": JD},
    )

    assert response.status_code == 409
    error = response.json()["error"]
    assert error["code"] == "duplicate_entry"
    assert "ENG-1" in error["message"]


@pytest.mark.unit
def test_create_job_invalid_link_is_400(client, as_user):
    as_user("admin")
    response = client.post(
        "/jobs",
        json={"role_code": "ENG-1", "role_name": "Backend", "location": "Pune", "jd_url": "ftp://x/jd.pdf"},
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "validation_error"


@pytest.mark.unit
def test_store_failure_is_502_with_store_message(client, as_user, monkeypatch):
    as_user("viewer")
    patch_async(
        monkeypatch,
        JobRepository,
        "list",
        StoreError("connection refused", operation="jobs.list"),
    )

    response = client.get("/jobs")

    assert response.status_code == 502
    assert response.json() == {
        "error": {
            "code": "store_error",
            "message": "connection refused",
            "details": {"operation": "jobs.list"},
        }
    }


@pytest.mark.unit
def test_job_import_json_summary(client, as_user, monkeypatch):
    as_user("admin")
    inserted = []
    patch_async(monkeypatch, JobRepository, "list_role_codes", set())
    patch_async(monkeypatch, JobRepository, "bulk_create", [], inserted)

    response = client.post(
        "/jobs/import",
        files={"file": ("jobs.csv", JOB_CSV.encode("utf-8-sig"), "text/csv")},
    )

    assert response.status_code == 200
    body = response.json()
    assert (body["inserted"], body["invalid"], body["duplicates"]) == (1, 1, 1)
    assert [job.role_code for job in inserted[0][0][0]] == ["ENG-1"]


@pytest.mark.unit
def test_job_import_csv_report_download(client, as_user, monkeypatch):
    as_user("admin")
    patch_async(monkeypatch, JobRepository, "list_role_codes", set())
    patch_async(monkeypatch, JobRepository, "bulk_create", [])

    response = client.post(
        "/jobs/import",
        params={"format": "csv"},
        files={"file": ("jobs.csv", JOB_CSV.encode("utf-8"), "text/csv")},
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "job_upload_result_" in response.headers["content-disposition"]
    lines = response.text.strip().split("\n")
    assert lines[0].startswith('"Row Number","Status","Reason","Role Code"')
    assert '"DUPLICATE_IN_FILE (YELLOW)"' in lines[2]


@pytest.mark.unit
def test_import_rejects_non_csv_file(client, as_user):
    as_user("admin")
    response = client.post(
        "/jobs/import",
        files={"file": ("jobs.xlsx", b"whatever", "application/octet-stream")},
    )
    assert response.status_code == 400


@pytest.mark.unit
def test_import_with_no_valid_rows(client, as_user, monkeypatch):
    as_user("admin")
    patch_async(monkeypatch, JobRepository, "list_role_codes", {"ENG-1"})

    response = client.post(
        "/jobs/import",
        files={"file": ("jobs.csv", f"Role Code,Role Name,Location,JD Context\nENG-1,B,P,{JD}".encode(), "text/csv")},
    )

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "no_valid_rows"
    assert error["details"]["rows"][0]["status"] == "ALREADY_EXISTS"


@pytest.mark.unit
def test_grouped_candidates_endpoint(client, as_user, monkeypatch):
    as_user("viewer")
    patch_async(monkeypatch, CandidateRepository, "list", [
        make_application("111", "A", minutes=0, application_id="APP-A"),
        make_application("111", "B", minutes=5, application_id="APP-B"),
    ])
    patch_async(monkeypatch, MatchResultRepository, "list_scores", [])

    response = client.get("/candidates/grouped")

    assert response.status_code == 200
    body = response.json()
    assert body[0]["contact"] == "111"
    assert body[0]["last_applied_roles"] == ["A: —, Null"]


@pytest.mark.unit
def test_start_mapping_empty_selection(client, as_user):
    as_user("recruiter")
    response = client.post("/cv-mapping/start", json={"ids": []})
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Please select at least one candidate"


@pytest.mark.unit
def test_screening_candidates_filters(client, as_user, monkeypatch):
    as_user("viewer")
    patch_async(monkeypatch, CandidateRepository, "list", [
        make_application("1", "ENG-1", application_id="APP-1", jd_mapping="DONE"),
        make_application("2", "ENG-1", application_id="APP-2", jd_mapping="DONE"),
    ])
    patch_async(monkeypatch, MatchResultRepository, "list_scores", [("APP-1", "ENG-1", "75"), ("APP-2", "ENG-1", "76")])

    response = client.get("/cv-mapping/screening-candidates", params={"score_min": 50, "score_max": 75})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert [item["application_id"] for item in body["items"]] == ["APP-1"]


@pytest.mark.unit
def test_dashboard_stats(client, as_user, monkeypatch):
    as_user("viewer")
    calls = []
    patch_async(
        monkeypatch,
        StatsRepository,
        "dashboard_counts",
        {"total_jobs": 3, "total_candidates": 10, "screened_candidates": 4, "active_screenings": 1},
        calls,
    )

    response = client.get("/dashboard/stats")

    assert response.json() == {
        "total_jobs": 3,
        "total_candidates": 10,
        "screened_candidates": 4,
        "active_screenings": 1,
    }
    assert calls[0][0] == (["pass", "passed", "completed"], "processing")


@pytest.mark.unit
def test_screening_outcomes_are_classified(client, as_user, monkeypatch):
    from conftest import make_outcome

    as_user("viewer")
    patch_async(monkeypatch, ScreeningRepository, "list_outcomes", [make_outcome("Failed", 20.0)])

    response = client.get("/screening")

    assert response.status_code == 200
    assert response.json()[0]["outcome_class"] == "rejected"
