"""API tests for the Job Master endpoints and lead intake."""

import pytest

PROJECT_JOB = {
    "job_id": "JOB-001",
    "category": "Project",
    "job_title": "Annual gala",
    "start_date": "2024-01-01T09:00:00Z",
    "project_type": "Event",
    "pic_project": "Rina",
    "requester_department": "Marketing",
    "lead_grade": "",
    "client_name": "",
}


@pytest.mark.asyncio
async def test_create_and_get_job(client):
    response = await client.post("/api/v1/jobs", json=PROJECT_JOB)

    assert response.status_code == 201
    body = response.json()
    assert body["job_id"] == "JOB-001"
    assert body["project_type"] == "Event"
    assert body["lead_grade"] is None
    assert body["client_name"] is None
    assert body["pic_requester"] is None

    response = await client.get("/api/v1/jobs/JOB-001")
    assert response.status_code == 200
    assert response.json()["job_title"] == "Annual gala"


@pytest.mark.asyncio
async def test_create_duplicate_job_id(client):
    await client.post("/api/v1/jobs", json=PROJECT_JOB)
    response = await client.post("/api/v1/jobs", json=PROJECT_JOB)

    assert response.status_code == 409
    assert "job_id" in response.json()["errors"]


@pytest.mark.asyncio
async def test_create_job_reports_errors_per_field(client):
    payload = {**PROJECT_JOB, "project_type": "", "pic_project": None, "lead_grade": "A"}
    response = await client.post("/api/v1/jobs", json=payload)

    assert response.status_code == 422
    errors = response.json()["errors"]
    assert set(errors) == {"project_type", "pic_project", "lead_grade"}


@pytest.mark.asyncio
async def test_missing_required_base_field_is_keyed_by_field(client):
    payload = {key: value for key, value in PROJECT_JOB.items() if key != "job_title"}
    response = await client.post("/api/v1/jobs", json=payload)

    assert response.status_code == 422
    assert "job_title" in response.json()["errors"]


@pytest.mark.asyncio
async def test_changing_category_nulls_previous_fields(client):
    await client.post("/api/v1/jobs", json=PROJECT_JOB)

    response = await client.put(
        "/api/v1/jobs/JOB-001",
        json={
            "category": "Internal",
            "job_title": "Annual gala (internal)",
            "start_date": "2024-01-01T09:00:00Z",
            "requester_department": "HR",
            "pic_requester": "Budi",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["category"] == "Internal"
    assert body["requester_department"] == "HR"
    assert body["project_type"] is None
    assert body["pic_project"] is None


@pytest.mark.asyncio
async def test_update_missing_job(client):
    response = await client.put(
        "/api/v1/jobs/NOPE",
        json={"category": "Other", "job_title": "x", "start_date": "2024-01-01"},
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_jobs_filters_by_category(client):
    await client.post("/api/v1/jobs", json=PROJECT_JOB)
    await client.post(
        "/api/v1/jobs",
        json={"job_id": "OTH-1", "category": "Other", "job_title": "Misc", "start_date": "2024-02-01"},
    )

    response = await client.get("/api/v1/jobs", params={"category": "Other"})
    assert response.status_code == 200
    assert [job["job_id"] for job in response.json()] == ["OTH-1"]


@pytest.mark.asyncio
async def test_delete_job(client):
    await client.post("/api/v1/jobs", json=PROJECT_JOB)

    response = await client.delete("/api/v1/jobs/JOB-001")
    assert response.status_code == 204

    response = await client.get("/api/v1/jobs/JOB-001")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_job_referenced_by_artwork_log(client):
    await client.post("/api/v1/jobs", json=PROJECT_JOB)
    await client.post(
        "/api/v1/artwork-logs",
        json={
            "category": "Project",
            "job_id": "JOB-001",
            "artwork_type": "Poster",
            "artwork_title": "Gala poster",
            "designer": "Dewi",
            "start_date": "2024-01-02T09:00:00Z",
        },
    )

    response = await client.delete("/api/v1/jobs/JOB-001")
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_submit_lead(client):
    response = await client.post(
        "/api/v1/leads",
        json={
            "client_name": "Acme",
            "pic_requester": "Sari",
            "lead_grade": "B",
            "job_title": "Rebrand pitch",
            "custom_brief": "",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["job_id"].startswith("LEAD-")
    assert body["category"] == "Lead"
    assert body["lead_grade"] == "B"
    assert body["custom_brief"] is None
    assert body["requester_department"] is None
    assert body["project_type"] is None


@pytest.mark.asyncio
async def test_submit_lead_rejects_unknown_grade(client):
    response = await client.post(
        "/api/v1/leads",
        json={"client_name": "Acme", "pic_requester": "Sari", "lead_grade": "E", "job_title": "Pitch"},
    )
    assert response.status_code == 422
    assert "lead_grade" in response.json()["errors"]


@pytest.mark.asyncio
async def test_job_id_with_slashes(client):
    response = await client.post("/api/v1/jobs", json={**PROJECT_JOB, "job_id": "JOB/2024/001"})
    assert response.status_code == 201

    response = await client.get("/api/v1/jobs/JOB%2F2024%2F001")
    assert response.status_code == 200
    assert response.json()["job_id"] == "JOB/2024/001"

    response = await client.put(
        "/api/v1/jobs/JOB%2F2024%2F001", json={**PROJECT_JOB, "job_title": "Gala dinner"}
    )
    assert response.status_code == 200
    assert response.json()["job_title"] == "Gala dinner"

    response = await client.delete("/api/v1/jobs/JOB%2F2024%2F001")
    assert response.status_code == 204
