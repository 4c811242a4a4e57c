"""End-to-end walk through the board: account, projects, task lifecycle."""

import pytest
from httpx import AsyncClient

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def test_full_board_flow(client: AsyncClient) -> None:
    registered = await client.post(
        "/api/auth/register",
        json={"name": "A", "email": "a@x.com", "password": "secret", "country": "US"},
    )
    assert registered.status_code == 201
    token = registered.json()["token"]
    assert token
    headers = {"Authorization": f"Bearer {token}"}

    wrong = await client.post("/api/auth/login", json={"email": "a@x.com", "password": "nope"})
    assert wrong.status_code == 401
    assert wrong.json()["message"] == "Invalid email or password"

    project_ids = []
    for _ in range(4):
        created = await client.post("/api/projects", json={"name": "P1"}, headers=headers)
        assert created.status_code == 201
        project_ids.append(created.json()["id"])

    fifth = await client.post("/api/projects", json={"name": "P1"}, headers=headers)
    assert fifth.status_code == 400
    assert fifth.json()["message"] == "You can have a maximum of 4 projects"

    p1 = project_ids[0]
    task = await client.post(
        f"/api/projects/{p1}/tasks", json={"title": "T1", "status": "todo"}, headers=headers
    )
    assert task.status_code == 201
    assert "completedAt" not in task.json()
    task_url = f"/api/projects/{p1}/tasks/{task.json()['id']}"

    completed = await client.put(task_url, json={"status": "completed"}, headers=headers)
    assert completed.status_code == 200
    assert completed.json()["completedAt"]

    reopened = await client.put(task_url, json={"status": "todo"}, headers=headers)
    assert reopened.status_code == 200
    assert "completedAt" not in reopened.json()
