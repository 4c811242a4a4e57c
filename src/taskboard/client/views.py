"""Derived views over client state."""

from collections.abc import Iterable
from typing import Any

STATUS_COLUMNS = ("todo", "inProgress", "completed")


def filter_projects(projects: Iterable[dict[str, Any]], query: str) -> list[dict[str, Any]]:
    """Case-insensitive substring match on project name or description.

    The query is used as typed, surrounding whitespace included.
    """
    if query == "":
        return list(projects)
    needle = query.lower()
    return [
        project
        for project in projects
        if needle in (project.get("name") or "").lower()
        or needle in (project.get("description") or "").lower()
    ]


def group_tasks_by_status(tasks: Iterable[dict[str, Any]]) -> dict[str, list[dict[str, Any]]]:
    """Split tasks into the board's status columns, keeping input order."""
    columns: dict[str, list[dict[str, Any]]] = {status: [] for status in STATUS_COLUMNS}
    for task in tasks:
        columns.setdefault(task.get("status", "todo"), []).append(task)
    return columns
