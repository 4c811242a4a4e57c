"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.taskboard.api.dependencies.db import DBSession
from src.taskboard.api.dependencies.repositories import ProjectRepo, TaskRepo, UserRepo
from src.taskboard.services import AuthService, ProjectService, TaskService


def get_auth_service(user_repo: UserRepo, session: DBSession) -> AuthService:
    """Get auth service."""
    return AuthService(user_repo, session)


def get_project_service(
    project_repo: ProjectRepo,
    task_repo: TaskRepo,
    user_repo: UserRepo,
    session: DBSession,
) -> ProjectService:
    """Get project service."""
    return ProjectService(project_repo, task_repo, user_repo, session)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]


def get_task_service(
    project_service: ProjectServiceDep,
    task_repo: TaskRepo,
    session: DBSession,
) -> TaskService:
    """Get task service sharing the project service's session."""
    return TaskService(project_service, task_repo, session)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
