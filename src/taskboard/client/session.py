"""Client session: runs API calls and records their outcome in the store."""

from collections.abc import Awaitable
from typing import Any, TypeVar

import httpx

from src.taskboard.client import store as actions
from src.taskboard.client.api import ApiError, TaskboardClient
from src.taskboard.client.storage import TokenStorage
from src.taskboard.client.store import AppState, Store
from src.taskboard.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TaskboardSession:
    """Glue between ``TaskboardClient`` and ``Store``.

    Every operation dispatches pending, then fulfilled or rejected. After a
    mutation the project list (and the open project) is fetched again so
    the store mirrors the server. Failures (``ApiError``, transport errors,
    undecodable bodies) are re-raised after the rejected action is recorded.
    """

    def __init__(
        self,
        client: TaskboardClient,
        storage: TokenStorage | None = None,
        store: Store | None = None,
    ):
        self.client = client
        self.storage = storage
        self.store = store or Store()

        saved = storage.load() if storage else None
        if saved is not None:
            token, user = saved
            self.client.token = token
            self.store.dispatch(actions.Action(actions.RESTORE_SESSION, (token, user)))

    @property
    def state(self) -> AppState:
        return self.store.state

    async def _run(self, op: str, call: Awaitable[T], payload: Any = None) -> T:
        self.store.dispatch(actions.pending(op))
        try:
            result = await call
        except ApiError as e:
            logger.warning("API call rejected", op=op, status_code=e.status_code)
            self.store.dispatch(actions.rejected(op, e.message))
            raise
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("API call failed", op=op, error=type(e).__name__)
            self.store.dispatch(actions.rejected(op, str(e) or "Request failed"))
            raise
        self.store.dispatch(actions.fulfilled(op, result if payload is None else payload))
        return result

    def _remember(self, auth: dict[str, Any]) -> None:
        self.client.token = auth["token"]
        if self.storage is not None:
            user = {k: v for k, v in auth.items() if k != "token"}
            self.storage.save(auth["token"], user)

    async def _resync(self, project_id: str | None = None) -> None:
        await self.fetch_projects()
        current = self.state.projects.current_project
        if project_id is not None and current is not None and current.get("id") == project_id:
            await self.open_project(project_id)

    # Auth

    async def register(self, name: str, email: str, password: str, country: str) -> dict[str, Any]:
        auth = await self._run(
            actions.REGISTER, self.client.register(name, email, password, country)
        )
        self._remember(auth)
        return auth

    async def login(self, email: str, password: str) -> dict[str, Any]:
        auth = await self._run(actions.LOGIN, self.client.login(email, password))
        self._remember(auth)
        return auth

    async def load_profile(self) -> dict[str, Any]:
        return await self._run(actions.LOAD_PROFILE, self.client.profile())

    def logout(self) -> None:
        """Forget the token and reset every slice."""
        self.client.token = None
        if self.storage is not None:
            self.storage.clear()
        self.store.dispatch(actions.Action(actions.LOGOUT))

    # Projects

    async def fetch_projects(self) -> list[dict[str, Any]]:
        return await self._run(actions.FETCH_PROJECTS, self.client.list_projects())

    async def open_project(self, project_id: str) -> dict[str, Any]:
        """Load one project as the current project, plus its task list."""
        project = await self._run(actions.GET_PROJECT, self.client.get_project(project_id))
        await self.fetch_tasks(project_id)
        return project

    async def create_project(self, name: str, description: str | None = None) -> dict[str, Any]:
        project = await self._run(
            actions.CREATE_PROJECT, self.client.create_project(name, description)
        )
        await self._resync()
        return project

    async def update_project(self, project_id: str, **fields: Any) -> dict[str, Any]:
        project = await self._run(
            actions.UPDATE_PROJECT, self.client.update_project(project_id, **fields)
        )
        await self._resync(project_id)
        return project

    async def delete_project(self, project_id: str) -> None:
        await self._run(
            actions.DELETE_PROJECT, self.client.delete_project(project_id), payload=project_id
        )
        await self._resync()

    # Tasks

    async def fetch_tasks(self, project_id: str) -> list[dict[str, Any]]:
        return await self._run(actions.FETCH_TASKS, self.client.list_tasks(project_id))

    async def create_task(
        self,
        project_id: str,
        title: str,
        description: str | None = None,
        status: str | None = None,
    ) -> dict[str, Any]:
        task = await self._run(
            actions.CREATE_TASK, self.client.create_task(project_id, title, description, status)
        )
        await self._resync(project_id)
        return task

    async def update_task(self, project_id: str, task_id: str, **fields: Any) -> dict[str, Any]:
        task = await self._run(
            actions.UPDATE_TASK, self.client.update_task(project_id, task_id, **fields)
        )
        await self._resync(project_id)
        return task

    async def delete_task(self, project_id: str, task_id: str) -> None:
        await self._run(
            actions.DELETE_TASK, self.client.delete_task(project_id, task_id), payload=task_id
        )
        await self._resync(project_id)
