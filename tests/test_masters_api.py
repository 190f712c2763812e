"""API tests for the designer, artwork type and project type masters."""

import pytest


@pytest.mark.asyncio
async def test_designer_crud(client):
    response = await client.post(
        "/api/v1/designers",
        json={"designer_id": "D-01", "designer_name": "Dewi", "role": "Senior", "status": ""},
    )
    assert response.status_code == 201
    assert response.json()["status"] is None

    response = await client.patch("/api/v1/designers/D-01", json={"status": "Active"})
    assert response.status_code == 200
    assert response.json()["status"] == "Active"
    assert response.json()["designer_name"] == "Dewi"

    response = await client.get("/api/v1/designers")
    assert [d["designer_id"] for d in response.json()] == ["D-01"]

    response = await client.delete("/api/v1/designers/D-01")
    assert response.status_code == 204
    response = await client.get("/api/v1/designers/D-01")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_duplicate_designer_id(client):
    payload = {"designer_id": "D-01", "designer_name": "Dewi"}
    await client.post("/api/v1/designers", json=payload)

    response = await client.post("/api/v1/designers", json=payload)
    assert response.status_code == 409
    assert "designer_id" in response.json()["errors"]


@pytest.mark.asyncio
async def test_designer_name_cannot_be_cleared(client):
    await client.post("/api/v1/designers", json={"designer_id": "D-01", "designer_name": "Dewi"})

    response = await client.patch("/api/v1/designers/D-01", json={"designer_name": ""})
    assert response.status_code == 422
    assert "designer_name" in response.json()["errors"]


@pytest.mark.asyncio
async def test_artwork_type_rename_and_delete(client):
    await client.post("/api/v1/artwork-types", json={"type_name": "Poster"})
    await client.post("/api/v1/artwork-types", json={"type_name": "Banner"})

    response = await client.patch("/api/v1/artwork-types/Poster", json={"type_name": "Banner"})
    assert response.status_code == 409

    response = await client.patch("/api/v1/artwork-types/Poster", json={"type_name": "Flyer"})
    assert response.status_code == 200
    assert response.json()["type_name"] == "Flyer"

    response = await client.get("/api/v1/artwork-types")
    assert [t["type_name"] for t in response.json()] == ["Banner", "Flyer"]

    response = await client.delete("/api/v1/artwork-types/Flyer")
    assert response.status_code == 204
    response = await client.delete("/api/v1/artwork-types/Flyer")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_project_type_crud(client):
    response = await client.post("/api/v1/project-types", json={"type_name": "Event"})
    assert response.status_code == 201
    event_id = response.json()["id"]

    response = await client.post("/api/v1/project-types", json={"type_name": "Event"})
    assert response.status_code == 409

    await client.post("/api/v1/project-types", json={"type_name": "Travel"})
    response = await client.patch(f"/api/v1/project-types/{event_id}", json={"type_name": "Travel"})
    assert response.status_code == 409

    response = await client.patch(f"/api/v1/project-types/{event_id}", json={"type_name": "Wellness"})
    assert response.status_code == 200
    assert response.json()["type_name"] == "Wellness"

    response = await client.delete(f"/api/v1/project-types/{event_id}")
    assert response.status_code == 204


@pytest.mark.asyncio
async def test_project_type_name_too_long(client):
    response = await client.post("/api/v1/project-types", json={"type_name": "x" * 256})
    assert response.status_code == 422
    assert "type_name" in response.json()["errors"]


@pytest.mark.asyncio
async def test_master_keys_with_slashes(client):
    await client.post("/api/v1/designers", json={"designer_id": "DSN/01", "designer_name": "Dewi"})
    response = await client.get("/api/v1/designers/DSN%2F01")
    assert response.status_code == 200
    assert response.json()["designer_name"] == "Dewi"

    await client.post("/api/v1/artwork-types", json={"type_name": "Print/Digital"})
    response = await client.patch("/api/v1/artwork-types/Print%2FDigital", json={"type_name": "Print"})
    assert response.status_code == 200

    response = await client.delete("/api/v1/artwork-types/Print")
    assert response.status_code == 204
    response = await client.delete("/api/v1/designers/DSN%2F01")
    assert response.status_code == 204
