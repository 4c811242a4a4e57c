"""Project model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from src.taskboard.models.base import utc_now


class Project(SQLModel, table=True):
    """Project owned by exactly one user.

    ``task_ids`` keeps the ordered references to the project's tasks as
    strings. Always assign a new list; in-place mutation is not tracked.
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    description: str | None = Field(default=None, max_length=1000)
    owner_id: UUID = Field(foreign_key="users.id", index=True)
    task_ids: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.owner_id == user_id
