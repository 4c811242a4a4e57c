"""Project endpoints - every route is scoped to the authenticated owner."""

from fastapi import APIRouter, status

from src.taskboard.api.dependencies import CurrentUser, ProjectId, ProjectServiceDep
from src.taskboard.schemas.common import MessageResponse
from src.taskboard.schemas.project import (
    ProjectCreate,
    ProjectDetail,
    ProjectRead,
    ProjectUpdate,
)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post(
    "",
    response_model=ProjectRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={
        201: {"description": "Project created"},
        400: {"description": "Project limit reached or invalid input"},
    },
)
async def create_project(
    user: CurrentUser,
    request: ProjectCreate,
    service: ProjectServiceDep,
) -> ProjectRead:
    """Create a project owned by the caller."""
    return await service.create(user.id, request.name, request.description)


@router.get(
    "",
    response_model=list[ProjectDetail],
    response_model_exclude_none=True,
    summary="List projects",
    description="All projects of the caller, newest first, with tasks populated.",
)
async def list_projects(user: CurrentUser, service: ProjectServiceDep) -> list[ProjectDetail]:
    return await service.list_for_owner(user.id)


@router.get(
    "/{project_id}",
    response_model=ProjectDetail,
    response_model_exclude_none=True,
    summary="Get project",
    responses={
        200: {"description": "Project with tasks populated"},
        403: {"description": "Project belongs to another user"},
        404: {"description": "Project not found"},
    },
)
async def get_project(
    user: CurrentUser,
    project_id: ProjectId,
    service: ProjectServiceDep,
) -> ProjectDetail:
    return await service.get(project_id, user.id)


@router.put(
    "/{project_id}",
    response_model=ProjectRead,
    response_model_exclude_none=True,
    summary="Update project",
    description="Merge-patch: absent or empty fields keep their current value.",
    responses={
        200: {"description": "Project updated"},
        403: {"description": "Project belongs to another user"},
        404: {"description": "Project not found"},
    },
)
async def update_project(
    user: CurrentUser,
    project_id: ProjectId,
    request: ProjectUpdate,
    service: ProjectServiceDep,
) -> ProjectRead:
    return await service.update(project_id, user.id, request)


@router.delete(
    "/{project_id}",
    response_model=MessageResponse,
    summary="Delete project",
    description="Deletes the project and all of its tasks.",
    responses={
        200: {"description": "Project removed"},
        403: {"description": "Project belongs to another user"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(
    user: CurrentUser,
    project_id: ProjectId,
    service: ProjectServiceDep,
) -> MessageResponse:
    await service.delete(project_id, user.id)
    return MessageResponse(message="Project removed")
