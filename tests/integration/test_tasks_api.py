"""Tests for task endpoints and the completion timestamp."""

from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.taskboard.models import Project, Task
from tests.helpers import create_project_with_tasks

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
async def project(client: AsyncClient, test_user: dict) -> dict:
    response = await client.post(
        "/api/projects", json={"name": "Board"}, headers=test_user["headers"]
    )
    assert response.status_code == 201
    return response.json()


def tasks_url(project_id: str, task_id: str | None = None) -> str:
    url = f"/api/projects/{project_id}/tasks"
    return f"{url}/{task_id}" if task_id else url


async def create_task(client: AsyncClient, headers: dict, project_id: str, **body) -> dict:
    response = await client.post(tasks_url(project_id), json={"title": "T1", **body}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateTask:
    async def test_create_defaults_to_todo(
        self, client: AsyncClient, test_user: dict, project: dict
    ) -> None:
        task = await create_task(client, test_user["headers"], project["id"])

        assert task["status"] == "todo"
        assert task["projectId"] == project["id"]
        assert task["userId"] == test_user["id"]
        assert "completedAt" not in task

    async def test_create_appends_to_project_list(
        self, client: AsyncClient, test_user: dict, project: dict
    ) -> None:
        first = await create_task(client, test_user["headers"], project["id"], title="A")
        second = await create_task(client, test_user["headers"], project["id"], title="B")

        response = await client.get(f"/api/projects/{project['id']}", headers=test_user["headers"])

        assert [t["id"] for t in response.json()["tasks"]] == [first["id"], second["id"]]

    async def test_create_completed_task_is_stamped(
        self, client: AsyncClient, test_user: dict, project: dict
    ) -> None:
        task = await create_task(client, test_user["headers"], project["id"], status="completed")

        assert task["status"] == "completed"
        assert task["completedAt"]

    async def test_title_is_required(
        self, client: AsyncClient, test_user: dict, project: dict
    ) -> None:
        response = await client.post(
            tasks_url(project["id"]), json={"title": "   "}, headers=test_user["headers"]
        )
        assert response.status_code == 400

    async def test_invalid_status_is_rejected(
        self, client: AsyncClient, test_user: dict, project: dict
    ) -> None:
        response = await client.post(
            tasks_url(project["id"]),
            json={"title": "T1", "status": "done"},
            headers=test_user["headers"],
        )
        assert response.status_code == 400
        assert response.json()["message"].startswith("status:")

    async def test_create_in_other_users_project_is_forbidden(
        self, client: AsyncClient, other_user: dict, project: dict
    ) -> None:
        response = await client.post(
            tasks_url(project["id"]), json={"title": "Sneaky"}, headers=other_user["headers"]
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Not authorized to add tasks to this project"

    async def test_create_in_missing_project(self, client: AsyncClient, test_user: dict) -> None:
        response = await client.post(
            tasks_url(str(uuid4())), json={"title": "T1"}, headers=test_user["headers"]
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Project not found"


class TestListTasks:
    async def test_list_newest_first(
        self, client: AsyncClient, test_user: dict, project: dict
    ) -> None:
        first = await create_task(client, test_user["headers"], project["id"], title="A")
        second = await create_task(client, test_user["headers"], project["id"], title="B")

        response = await client.get(tasks_url(project["id"]), headers=test_user["headers"])

        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == [second["id"], first["id"]]

    async def test_list_other_users_project_is_forbidden(
        self, client: AsyncClient, other_user: dict, project: dict
    ) -> None:
        response = await client.get(tasks_url(project["id"]), headers=other_user["headers"])

        assert response.status_code == 403
        assert response.json()["message"] == "Not authorized to view tasks in this project"


class TestUpdateTask:
    async def test_completion_is_stamped_and_cleared(
        self, client: AsyncClient, test_user: dict, project: dict
    ) -> None:
        task = await create_task(client, test_user["headers"], project["id"])
        url = tasks_url(project["id"], task["id"])

        done = await client.put(url, json={"status": "completed"}, headers=test_user["headers"])
        assert done.status_code == 200
        assert done.json()["completedAt"]

        reopened = await client.put(url, json={"status": "todo"}, headers=test_user["headers"])
        assert reopened.status_code == 200
        assert "completedAt" not in reopened.json()

    async def test_completed_at_survives_repeat_and_unrelated_edits(
        self, client: AsyncClient, test_user: dict, project: dict
    ) -> None:
        task = await create_task(client, test_user["headers"], project["id"], status="completed")
        url = tasks_url(project["id"], task["id"])

        again = await client.put(url, json={"status": "completed"}, headers=test_user["headers"])
        renamed = await client.put(url, json={"title": "Renamed"}, headers=test_user["headers"])

        assert again.json()["completedAt"] == task["completedAt"]
        assert renamed.json()["completedAt"] == task["completedAt"]
        assert renamed.json()["title"] == "Renamed"

    async def test_in_progress_has_no_completion(
        self, client: AsyncClient, test_user: dict, project: dict
    ) -> None:
        task = await create_task(client, test_user["headers"], project["id"], status="completed")

        response = await client.put(
            tasks_url(project["id"], task["id"]),
            json={"status": "inProgress"},
            headers=test_user["headers"],
        )

        assert response.json()["status"] == "inProgress"
        assert "completedAt" not in response.json()

    async def test_merge_patch_keeps_other_fields(
        self, client: AsyncClient, test_user: dict, project: dict
    ) -> None:
        task = await create_task(
            client, test_user["headers"], project["id"], description="Details"
        )

        response = await client.put(
            tasks_url(project["id"], task["id"]),
            json={"title": "", "status": "inProgress"},
            headers=test_user["headers"],
        )

        data = response.json()
        assert data["title"] == "T1"
        assert data["description"] == "Details"
        assert data["status"] == "inProgress"

    async def test_project_ownership_is_checked_before_task(
        self, client: AsyncClient, other_user: dict, project: dict
    ) -> None:
        response = await client.put(
            tasks_url(project["id"], str(uuid4())),
            json={"status": "completed"},
            headers=other_user["headers"],
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Not authorized to update tasks in this project"

    async def test_missing_task(self, client: AsyncClient, test_user: dict, project: dict) -> None:
        response = await client.put(
            tasks_url(project["id"], str(uuid4())),
            json={"status": "completed"},
            headers=test_user["headers"],
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Task not found"

    async def test_task_from_another_project_is_not_found(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        test_user: dict,
        project: dict,
    ) -> None:
        _, tasks = await create_project_with_tasks(db_session, test_user["user"], 1)
        await db_session.commit()

        response = await client.put(
            tasks_url(project["id"], str(tasks[0].id)),
            json={"title": "Moved?"},
            headers=test_user["headers"],
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Task not found"


class TestDeleteTask:
    async def test_delete_removes_from_project_list(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        test_user: dict,
        project: dict,
    ) -> None:
        keep = await create_task(client, test_user["headers"], project["id"], title="Keep")
        drop = await create_task(client, test_user["headers"], project["id"], title="Drop")

        response = await client.delete(
            tasks_url(project["id"], drop["id"]), headers=test_user["headers"]
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Task removed"}

        detail = await client.get(f"/api/projects/{project['id']}", headers=test_user["headers"])
        assert [t["id"] for t in detail.json()["tasks"]] == [keep["id"]]

        stored = await db_session.get(Project, UUID(project["id"]))
        assert stored.task_ids == [keep["id"]]
        assert await db_session.get(Task, UUID(drop["id"])) is None

    async def test_delete_other_users_task_is_forbidden(
        self, client: AsyncClient, test_user: dict, other_user: dict, project: dict
    ) -> None:
        task = await create_task(client, test_user["headers"], project["id"])

        response = await client.delete(
            tasks_url(project["id"], task["id"]), headers=other_user["headers"]
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Not authorized to delete tasks in this project"

    async def test_delete_missing_task(
        self, client: AsyncClient, test_user: dict, project: dict
    ) -> None:
        response = await client.delete(
            tasks_url(project["id"], str(uuid4())), headers=test_user["headers"]
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Task not found"

    async def test_malformed_task_id(
        self, client: AsyncClient, test_user: dict, project: dict
    ) -> None:
        response = await client.delete(
            tasks_url(project["id"], "nope"), headers=test_user["headers"]
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Task not found"
