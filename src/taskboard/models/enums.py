"""Shared enums for models."""

from enum import Enum


class TaskStatus(str, Enum):
    """Board column a task sits in."""

    TODO = "todo"
    IN_PROGRESS = "inProgress"
    COMPLETED = "completed"
