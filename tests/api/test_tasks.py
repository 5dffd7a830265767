"""Task REST endpoints against the in-memory store."""

from httpx import AsyncClient


async def _create(api_client: AsyncClient, **body) -> dict:
    response = await api_client.post("/api/v1/tasks", json=body)
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_uses_taxonomy_defaults_and_lane_order(api_client: AsyncClient) -> None:
    first = await _create(api_client, title="Write docs")
    second = await _create(api_client, title="Review docs", assignees=["Alice"])
    assert first["status"] == "To Do"
    assert first["priority"] == "Medium"
    assert (first["order"], second["order"]) == (0, 1)
    assert second["assignees"] == ["Alice"]


async def test_create_rejects_unknown_status(api_client: AsyncClient) -> None:
    response = await api_client.post("/api/v1/tasks", json={"title": "X", "status": "Someday"})
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_create_rejects_due_before_start(api_client: AsyncClient) -> None:
    response = await api_client.post(
        "/api/v1/tasks",
        json={"title": "X", "start_date": "2025-06-10", "due_date": "2025-06-01"},
    )
    assert response.status_code == 422


async def test_get_missing_task_is_404(api_client: AsyncClient) -> None:
    response = await api_client.get("/api/v1/tasks/nope")
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_patch_only_changes_sent_fields(api_client: AsyncClient) -> None:
    task = await _create(api_client, title="Write docs", priority="Low", tags=["docs"])
    response = await api_client.patch(
        f"/api/v1/tasks/{task['id']}", json={"priority": "High", "due_date": "2025-07-01"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["priority"] == "High"
    assert data["due_date"] == "2025-07-01"
    assert data["tags"] == ["docs"]


async def test_dependency_cycle_is_409(api_client: AsyncClient) -> None:
    a = await _create(api_client, title="A")
    b = await _create(api_client, title="B")
    response = await api_client.post(
        f"/api/v1/tasks/{a['id']}/dependencies", json={"dependency_id": b["id"]}
    )
    assert response.status_code == 200
    assert response.json()["depends_on"] == [b["id"]]

    response = await api_client.post(
        f"/api/v1/tasks/{b['id']}/dependencies", json={"dependency_id": a["id"]}
    )
    assert response.status_code == 409
    assert response.json()["error"] == "CIRCULAR_DEPENDENCY"
    assert (await api_client.get(f"/api/v1/tasks/{b['id']}")).json()["depends_on"] == []

    response = await api_client.delete(f"/api/v1/tasks/{a['id']}/dependencies/{b['id']}")
    assert response.json()["depends_on"] == []


async def test_delete_prunes_references(api_client: AsyncClient) -> None:
    parent = await _create(api_client, title="Parent")
    child = await _create(api_client, title="Child", parent_id=parent["id"], depends_on=[parent["id"]])
    subtasks = (await api_client.get(f"/api/v1/tasks/{parent['id']}/subtasks")).json()
    assert [t["id"] for t in subtasks] == [child["id"]]

    response = await api_client.delete(f"/api/v1/tasks/{parent['id']}")
    assert response.status_code == 204
    remaining = (await api_client.get(f"/api/v1/tasks/{child['id']}")).json()
    assert remaining["parent_id"] is None
    assert remaining["depends_on"] == []


async def test_move_and_toggle_completion(api_client: AsyncClient) -> None:
    task = await _create(api_client, title="Ship")
    moved = await api_client.post(
        f"/api/v1/tasks/{task['id']}/move", json={"status": "In Progress"}
    )
    assert moved.json()["status"] == "In Progress"
    toggled = await api_client.post(f"/api/v1/tasks/{task['id']}/toggle-completion")
    assert toggled.json()["status"] == "Completed"


async def test_list_filters_and_orders_by_due_date(api_client: AsyncClient) -> None:
    await _create(api_client, title="Later", due_date="2031-02-01", assignees=["Bob"])
    await _create(api_client, title="Sooner", due_date="2031-01-01", assignees=["Bob"])
    await _create(api_client, title="Undated", assignees=["Bob"])
    await _create(api_client, title="Someone else", assignees=["Alice"])
    response = await api_client.get("/api/v1/tasks", params={"assignee": "Bob"})
    assert response.status_code == 200
    assert [t["title"] for t in response.json()] == ["Sooner", "Later", "Undated"]

    response = await api_client.get(
        "/api/v1/tasks", params={"assignees_include_any": ["Alice", "Zonaid"]}
    )
    assert [t["title"] for t in response.json()] == ["Someone else"]
