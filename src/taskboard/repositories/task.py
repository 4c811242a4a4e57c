"""Repository for Task entity."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select

from src.taskboard.models import Task
from src.taskboard.repositories.base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Repository for Task entity."""

    model = Task

    async def list_for_project(self, project_id: UUID) -> list[Task]:
        """List a project's tasks, newest first."""
        result = await self.session.execute(
            select(Task)
            .where(Task.project_id == project_id)
            .order_by(Task.created_at.desc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())

    async def get_in_project(self, task_id: UUID, project_id: UUID) -> Task | None:
        """Get a task only if it belongs to the given project."""
        result = await self.session.execute(
            select(Task).where(Task.id == task_id, Task.project_id == project_id)
        )
        return result.scalar_one_or_none()

    async def get_many_ordered(self, task_ids: Sequence[str]) -> list[Task]:
        """Resolve task references, keeping the order of ``task_ids``.

        References to tasks that no longer exist are skipped.
        """
        if not task_ids:
            return []
        ids = [UUID(task_id) for task_id in task_ids]
        result = await self.session.execute(select(Task).where(Task.id.in_(ids)))  # type: ignore[attr-defined]
        by_id = {str(task.id): task for task in result.scalars().all()}
        return [by_id[task_id] for task_id in task_ids if task_id in by_id]

    async def delete_for_project(self, project_id: UUID) -> int:
        """Delete every task of a project (no commit). Returns rows removed."""
        result = await self.session.execute(delete(Task).where(Task.project_id == project_id))  # type: ignore[arg-type]
        return result.rowcount or 0
