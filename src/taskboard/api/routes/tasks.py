"""Task endpoints, nested under the owning project."""

from fastapi import APIRouter, status

from src.taskboard.api.dependencies import CurrentUser, ProjectId, TaskId, TaskServiceDep
from src.taskboard.schemas.common import MessageResponse
from src.taskboard.schemas.task import TaskCreate, TaskRead, TaskUpdate

router = APIRouter(prefix="/projects/{project_id}/tasks", tags=["tasks"])


@router.post(
    "",
    response_model=TaskRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create task",
    responses={
        201: {"description": "Task created and appended to the project"},
        400: {"description": "Invalid input"},
        403: {"description": "Project belongs to another user"},
        404: {"description": "Project not found"},
    },
)
async def create_task(
    user: CurrentUser,
    project_id: ProjectId,
    request: TaskCreate,
    service: TaskServiceDep,
) -> TaskRead:
    return await service.create(project_id, user.id, request)


@router.get(
    "",
    response_model=list[TaskRead],
    response_model_exclude_none=True,
    summary="List tasks",
    description="Tasks of the project, newest first.",
    responses={
        403: {"description": "Project belongs to another user"},
        404: {"description": "Project not found"},
    },
)
async def list_tasks(
    user: CurrentUser,
    project_id: ProjectId,
    service: TaskServiceDep,
) -> list[TaskRead]:
    return await service.list_for_project(project_id, user.id)


@router.put(
    "/{task_id}",
    response_model=TaskRead,
    response_model_exclude_none=True,
    summary="Update task",
    description=(
        "Merge-patch of title, description and status. Moving into `completed` "
        "stamps `completed_at`; moving anywhere else clears it."
    ),
    responses={
        200: {"description": "Task updated"},
        403: {"description": "Project belongs to another user"},
        404: {"description": "Project or task not found"},
    },
)
async def update_task(
    user: CurrentUser,
    project_id: ProjectId,
    task_id: TaskId,
    request: TaskUpdate,
    service: TaskServiceDep,
) -> TaskRead:
    return await service.update(project_id, task_id, user.id, request)


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    summary="Delete task",
    responses={
        200: {"description": "Task removed"},
        403: {"description": "Project belongs to another user"},
        404: {"description": "Project or task not found"},
    },
)
async def delete_task(
    user: CurrentUser,
    project_id: ProjectId,
    task_id: TaskId,
    service: TaskServiceDep,
) -> MessageResponse:
    await service.delete(project_id, task_id, user.id)
    return MessageResponse(message="Task removed")
