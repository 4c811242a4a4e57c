from src.taskboard.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from src.taskboard.schemas.common import MessageResponse
from src.taskboard.schemas.project import (
    ProjectCreate,
    ProjectDetail,
    ProjectRead,
    ProjectUpdate,
)
from src.taskboard.schemas.task import TaskCreate, TaskRead, TaskUpdate
from src.taskboard.schemas.user import UserRead

__all__ = [
    # Auth
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    # Common
    "MessageResponse",
    # Project
    "ProjectCreate",
    "ProjectDetail",
    "ProjectRead",
    "ProjectUpdate",
    # Task
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
    # User
    "UserRead",
]
