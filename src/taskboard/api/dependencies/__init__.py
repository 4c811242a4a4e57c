"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

from src.taskboard.api.dependencies.auth import CurrentUser, get_current_user
from src.taskboard.api.dependencies.db import DBSession, get_db_session
from src.taskboard.api.dependencies.ids import ProjectId, TaskId
from src.taskboard.api.dependencies.repositories import (
    ProjectRepo,
    TaskRepo,
    UserRepo,
    get_project_repository,
    get_task_repository,
    get_user_repository,
)
from src.taskboard.api.dependencies.services import (
    AuthServiceDep,
    ProjectServiceDep,
    TaskServiceDep,
    get_auth_service,
    get_project_service,
    get_task_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Path ids
    "ProjectId",
    "TaskId",
    # Auth
    "CurrentUser",
    "get_current_user",
    # Repositories
    "ProjectRepo",
    "TaskRepo",
    "UserRepo",
    "get_project_repository",
    "get_task_repository",
    "get_user_repository",
    # Services
    "AuthServiceDep",
    "ProjectServiceDep",
    "TaskServiceDep",
    "get_auth_service",
    "get_project_service",
    "get_task_service",
]
