"""Project service - owner-scoped project CRUD with the per-user cap."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.taskboard.core.config import get_settings
from src.taskboard.core.exceptions import (
    ForbiddenError,
    NotFoundError,
    ProjectLimitExceededError,
)
from src.taskboard.core.logging import get_logger
from src.taskboard.models import Project
from src.taskboard.models.base import utc_now
from src.taskboard.repositories import ProjectRepository, TaskRepository, UserRepository
from src.taskboard.schemas.project import ProjectDetail, ProjectRead, ProjectUpdate
from src.taskboard.services.merge_patch import apply_merge_patch

logger = get_logger(__name__)


class ProjectService:
    """Project management service.

    Lookups distinguish a missing project (404) from someone else's
    project (403).
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        task_repo: TaskRepository,
        user_repo: UserRepository,
        session: AsyncSession,
    ):
        self.project_repo = project_repo
        self.task_repo = task_repo
        self.user_repo = user_repo
        self.session = session

    async def get_owned(
        self,
        project_id: UUID,
        user_id: UUID,
        action: str = "access this project",
        for_update: bool = False,
    ) -> Project:
        """Load a project and check that ``user_id`` owns it.

        Args:
            project_id: Project to load
            user_id: Caller
            action: Completes the "Not authorized to ..." message
            for_update: Lock the project row for the rest of the transaction

        Raises:
            NotFoundError: No project with this id.
            ForbiddenError: The project belongs to another user.
        """
        project = await self.project_repo.get_by_id(project_id, for_update=for_update)
        if project is None:
            raise NotFoundError("Project not found")
        if not project.is_owned_by(user_id):
            logger.warning("Project access denied", project_id=str(project_id))
            raise ForbiddenError(f"Not authorized to {action}")
        return project

    async def _with_tasks(self, project: Project) -> ProjectDetail:
        tasks = await self.task_repo.get_many_ordered(project.task_ids)
        return ProjectDetail.from_model_with_tasks(project, tasks)

    async def create(self, owner_id: UUID, name: str, description: str | None) -> ProjectRead:
        """Create a project unless the owner is already at the cap.

        The owner row is locked while counting so two concurrent creates
        cannot both pass the check (on backends with row locks).

        Raises:
            ProjectLimitExceededError: Owner already has the maximum number of projects.
        """
        limit = get_settings().max_projects_per_user
        try:
            await self.user_repo.get_by_id(owner_id, for_update=True)
            count = await self.project_repo.count_for_owner(owner_id)
            if count >= limit:
                logger.warning("Project limit reached", project_count=count, limit=limit)
                raise ProjectLimitExceededError(limit)

            project = Project(name=name, description=description, owner_id=owner_id)
            self.project_repo.add(project)
            await self.session.commit()
            await self.session.refresh(project)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project created", project_id=str(project.id))
        return ProjectRead.from_model(project)

    async def list_for_owner(self, owner_id: UUID) -> list[ProjectDetail]:
        """All of a user's projects, newest first, tasks resolved."""
        projects = await self.project_repo.list_for_owner(owner_id)
        return [await self._with_tasks(project) for project in projects]

    async def get(self, project_id: UUID, user_id: UUID) -> ProjectDetail:
        """One project with its tasks resolved."""
        project = await self.get_owned(project_id, user_id)
        return await self._with_tasks(project)

    async def update(self, project_id: UUID, user_id: UUID, data: ProjectUpdate) -> ProjectRead:
        """Apply a merge-patch of name/description."""
        project = await self.get_owned(project_id, user_id, "update this project")

        if apply_merge_patch(project, data):
            project.updated_at = utc_now()
            try:
                await self.session.commit()
                await self.session.refresh(project)
            except Exception:
                await self.session.rollback()
                raise

        return ProjectRead.from_model(project)

    async def delete(self, project_id: UUID, user_id: UUID) -> None:
        """Delete a project and every task under it in one transaction."""
        project = await self.get_owned(project_id, user_id, "delete this project")

        try:
            removed = await self.task_repo.delete_for_project(project.id)
            await self.project_repo.delete(project)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project deleted", project_id=str(project_id), tasks_removed=removed)
