"""Async HTTP client for the taskboard API."""

from typing import Any

import httpx


class ApiError(Exception):
    """Non-2xx response. ``message`` is the server's ``message`` field."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason_phrase


class TaskboardClient:
    """Thin wrapper over ``httpx.AsyncClient``, one method per endpoint.

    The bearer token, once set, is sent on every request.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.token = token
        self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "TaskboardClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, json: dict[str, Any] | None = None) -> Any:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        response = await self._http.request(method, path, json=json, headers=headers)
        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        return response.json()

    # Auth

    async def register(self, name: str, email: str, password: str, country: str) -> dict[str, Any]:
        return await self._request(
            "POST",
            "/api/auth/register",
            {"name": name, "email": email, "password": password, "country": country},
        )

    async def login(self, email: str, password: str) -> dict[str, Any]:
        return await self._request("POST", "/api/auth/login", {"email": email, "password": password})

    async def profile(self) -> dict[str, Any]:
        return await self._request("GET", "/api/auth/profile")

    async def status(self) -> dict[str, Any]:
        return await self._request("GET", "/api/status")

    # Projects

    async def list_projects(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/api/projects")

    async def create_project(self, name: str, description: str | None = None) -> dict[str, Any]:
        return await self._request("POST", "/api/projects", {"name": name, "description": description})

    async def get_project(self, project_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/api/projects/{project_id}")

    async def update_project(self, project_id: str, **fields: Any) -> dict[str, Any]:
        return await self._request("PUT", f"/api/projects/{project_id}", fields)

    async def delete_project(self, project_id: str) -> dict[str, Any]:
        return await self._request("DELETE", f"/api/projects/{project_id}")

    # Tasks

    async def list_tasks(self, project_id: str) -> list[dict[str, Any]]:
        return await self._request("GET", f"/api/projects/{project_id}/tasks")

    async def create_task(
        self,
        project_id: str,
        title: str,
        description: str | None = None,
        status: str | None = None,
    ) -> dict[str, Any]:
        return await self._request(
            "POST",
            f"/api/projects/{project_id}/tasks",
            {"title": title, "description": description, "status": status},
        )

    async def update_task(self, project_id: str, task_id: str, **fields: Any) -> dict[str, Any]:
        return await self._request("PUT", f"/api/projects/{project_id}/tasks/{task_id}", fields)

    async def delete_task(self, project_id: str, task_id: str) -> dict[str, Any]:
        return await self._request("DELETE", f"/api/projects/{project_id}/tasks/{task_id}")
