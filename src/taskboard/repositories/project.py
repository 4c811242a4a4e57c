"""Repository for Project entity."""

from uuid import UUID

from sqlalchemy import func
from sqlmodel import select

from src.taskboard.models import Project
from src.taskboard.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def count_for_owner(self, owner_id: UUID) -> int:
        """Count projects owned by a user."""
        result = await self.session.execute(
            select(func.count()).select_from(Project).where(Project.owner_id == owner_id)
        )
        return int(result.scalar_one())

    async def list_for_owner(self, owner_id: UUID) -> list[Project]:
        """List a user's projects, newest first."""
        result = await self.session.execute(
            select(Project)
            .where(Project.owner_id == owner_id)
            .order_by(Project.created_at.desc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())
