"""Path id parsing: a malformed id names nothing, so it is a 404."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path

from src.taskboard.core.exceptions import NotFoundError


def parse_project_id(project_id: Annotated[str, Path()]) -> UUID:
    try:
        return UUID(project_id)
    except ValueError as e:
        raise NotFoundError("Project not found") from e


def parse_task_id(task_id: Annotated[str, Path()]) -> UUID:
    try:
        return UUID(task_id)
    except ValueError as e:
        raise NotFoundError("Task not found") from e


ProjectId = Annotated[UUID, Depends(parse_project_id)]
TaskId = Annotated[UUID, Depends(parse_task_id)]
