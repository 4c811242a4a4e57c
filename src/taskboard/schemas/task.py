"""Task schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.taskboard.models.enums import TaskStatus


class TaskCreate(BaseModel):
    """Schema for creating a task. Status defaults to ``todo``."""

    title: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    status: TaskStatus | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Task title cannot be empty or whitespace only")
        return v


class TaskUpdate(BaseModel):
    """Merge-patch for a task; empty values keep the current value."""

    title: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    status: TaskStatus | None = None


class TaskRead(BaseModel):
    """Schema for reading a task."""

    id: UUID
    title: str
    description: str | None = None
    status: TaskStatus
    project_id: UUID
    user_id: UUID
    completed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )
