"""Task service - tasks are reached only through a project the caller owns."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.taskboard.core.exceptions import NotFoundError
from src.taskboard.core.logging import get_logger
from src.taskboard.models import Task, TaskStatus
from src.taskboard.models.base import utc_now
from src.taskboard.repositories import TaskRepository
from src.taskboard.schemas.task import TaskCreate, TaskRead, TaskUpdate
from src.taskboard.services.merge_patch import apply_merge_patch
from src.taskboard.services.project_service import ProjectService

logger = get_logger(__name__)


class TaskService:
    """Task management service.

    Project ownership is always checked before the task is looked up.
    ``completed_at`` is maintained by the Task model's flush hook.
    """

    def __init__(
        self,
        project_service: ProjectService,
        task_repo: TaskRepository,
        session: AsyncSession,
    ):
        self.project_service = project_service
        self.task_repo = task_repo
        self.session = session

    async def _get_task(self, task_id: UUID, project_id: UUID) -> Task:
        task = await self.task_repo.get_in_project(task_id, project_id)
        if task is None:
            raise NotFoundError("Task not found")
        return task

    async def create(self, project_id: UUID, user_id: UUID, data: TaskCreate) -> TaskRead:
        """Create a task and append it to the project's task list."""
        try:
            project = await self.project_service.get_owned(
                project_id, user_id, "add tasks to this project", for_update=True
            )

            task = Task(
                title=data.title,
                description=data.description,
                status=(data.status or TaskStatus.TODO).value,
                project_id=project.id,
                user_id=project.owner_id,
            )
            self.task_repo.add(task)

            project.task_ids = [*project.task_ids, str(task.id)]
            project.updated_at = utc_now()

            await self.session.commit()
            await self.session.refresh(task)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Task created", task_id=str(task.id), project_id=str(project_id))
        return TaskRead.model_validate(task)

    async def list_for_project(self, project_id: UUID, user_id: UUID) -> list[TaskRead]:
        """A project's tasks, newest first."""
        await self.project_service.get_owned(project_id, user_id, "view tasks in this project")
        tasks = await self.task_repo.list_for_project(project_id)
        return [TaskRead.model_validate(task) for task in tasks]

    async def update(
        self, project_id: UUID, task_id: UUID, user_id: UUID, data: TaskUpdate
    ) -> TaskRead:
        """Apply a merge-patch of title/description/status."""
        await self.project_service.get_owned(project_id, user_id, "update tasks in this project")
        task = await self._get_task(task_id, project_id)
        previous_status = task.status

        changed = apply_merge_patch(task, data)
        if changed:
            task.updated_at = utc_now()
            try:
                await self.session.commit()
                await self.session.refresh(task)
            except Exception:
                await self.session.rollback()
                raise

        if "status" in changed and task.status != previous_status:
            logger.info(
                "Task status changed",
                task_id=str(task.id),
                from_status=previous_status,
                to_status=task.status,
            )
        return TaskRead.model_validate(task)

    async def delete(self, project_id: UUID, task_id: UUID, user_id: UUID) -> None:
        """Drop the task from the project's list, then delete the task itself."""
        try:
            project = await self.project_service.get_owned(
                project_id, user_id, "delete tasks in this project", for_update=True
            )
            task = await self._get_task(task_id, project_id)

            project.task_ids = [ref for ref in project.task_ids if ref != str(task.id)]
            project.updated_at = utc_now()
            await self.session.flush()

            await self.task_repo.delete(task)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Task deleted", task_id=str(task_id), project_id=str(project_id))
