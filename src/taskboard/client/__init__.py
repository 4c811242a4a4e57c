"""Python client for the taskboard API: HTTP calls plus a state container."""

from src.taskboard.client.api import ApiError, TaskboardClient
from src.taskboard.client.session import TaskboardSession
from src.taskboard.client.storage import TokenStorage
from src.taskboard.client.store import (
    Action,
    AppState,
    AuthState,
    ProjectsState,
    Store,
    TasksState,
)
from src.taskboard.client.views import STATUS_COLUMNS, filter_projects, group_tasks_by_status

__all__ = [
    "Action",
    "ApiError",
    "AppState",
    "AuthState",
    "ProjectsState",
    "STATUS_COLUMNS",
    "Store",
    "TaskboardClient",
    "TaskboardSession",
    "TasksState",
    "TokenStorage",
    "filter_projects",
    "group_tasks_by_status",
]
