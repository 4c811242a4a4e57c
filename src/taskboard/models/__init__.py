"""Model exports.

Import from here: `from src.taskboard.models import User, Project, Task`
"""

from src.taskboard.models.enums import TaskStatus
from src.taskboard.models.project import Project
from src.taskboard.models.task import Task, sync_completed_at
from src.taskboard.models.user import User

__all__ = [
    # Enums
    "TaskStatus",
    # Models
    "Project",
    "Task",
    "User",
    # Hooks
    "sync_completed_at",
]
