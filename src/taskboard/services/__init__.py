from src.taskboard.services.auth_service import AuthService
from src.taskboard.services.project_service import ProjectService
from src.taskboard.services.task_service import TaskService

__all__ = ["AuthService", "ProjectService", "TaskService"]
