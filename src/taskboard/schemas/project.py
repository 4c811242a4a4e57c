"""Project schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.taskboard.models import Project, Task
from src.taskboard.schemas.task import TaskRead


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=1000)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or whitespace only")
        return v


class ProjectUpdate(BaseModel):
    """Merge-patch for a project.

    Absent, null and empty values all mean "keep the current value".
    """

    name: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=1000)


class ProjectRead(BaseModel):
    """Project with task references as ids."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID
    name: str
    description: str | None = None
    owner_id: UUID
    tasks: list[UUID]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, project: Project) -> "ProjectRead":
        return cls(
            id=project.id,
            name=project.name,
            description=project.description,
            owner_id=project.owner_id,
            tasks=[UUID(task_id) for task_id in project.task_ids],
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class ProjectDetail(ProjectRead):
    """Project with its tasks resolved, in task-list order."""

    tasks: list[TaskRead]  # type: ignore[assignment]

    @classmethod
    def from_model_with_tasks(cls, project: Project, tasks: list[Task]) -> "ProjectDetail":
        return cls(
            id=project.id,
            name=project.name,
            description=project.description,
            owner_id=project.owner_id,
            tasks=[TaskRead.model_validate(task) for task in tasks],
            created_at=project.created_at,
            updated_at=project.updated_at,
        )
