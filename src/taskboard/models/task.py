"""Task model and its completion-timestamp hook."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import event, inspect
from sqlmodel import Field, SQLModel

from src.taskboard.models.base import utc_now
from src.taskboard.models.enums import TaskStatus


class Task(SQLModel, table=True):
    """Task inside a project. ``user_id`` is copied from the project owner."""

    __tablename__ = "tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    status: str = Field(default=TaskStatus.TODO.value, max_length=20)
    project_id: UUID = Field(foreign_key="projects.id", index=True)
    user_id: UUID = Field(foreign_key="users.id", index=True)
    completed_at: datetime | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)


def sync_completed_at(task: Task, now: datetime | None = None) -> None:
    """Apply the completion rule after ``task.status`` has been written.

    Entering ``completed`` stamps ``completed_at`` unless it is already set;
    any other status clears it.
    """
    if task.status == TaskStatus.COMPLETED.value:
        if task.completed_at is None:
            task.completed_at = now or utc_now()
    else:
        task.completed_at = None


def _status_changed(task: Task) -> bool:
    history = inspect(task).attrs.status.history
    return history.has_changes()


@event.listens_for(Task, "before_insert")
def _stamp_completion_on_insert(mapper: Any, connection: Any, target: Task) -> None:
    sync_completed_at(target)


@event.listens_for(Task, "before_update")
def _stamp_completion_on_update(mapper: Any, connection: Any, target: Task) -> None:
    # Fires for every dirty task, only act when status itself moved
    if _status_changed(target):
        sync_completed_at(target)
