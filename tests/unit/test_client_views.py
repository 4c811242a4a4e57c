"""Tests for client-side search and board grouping."""

import pytest

from src.taskboard.client.views import STATUS_COLUMNS, filter_projects, group_tasks_by_status

pytestmark = pytest.mark.unit

PROJECTS = [
    {"id": "1", "name": "Garden", "description": "Plant tomatoes"},
    {"id": "2", "name": "Taxes", "description": None},
    {"id": "3", "name": "Move house", "description": "Book the TRUCK"},
]


def test_filter_matches_name_case_insensitively():
    assert [p["id"] for p in filter_projects(PROJECTS, "gARd")] == ["1"]


def test_filter_matches_description():
    assert [p["id"] for p in filter_projects(PROJECTS, "truck")] == ["3"]


def test_filter_tolerates_missing_description():
    assert [p["id"] for p in filter_projects(PROJECTS, "tax")] == ["2"]


def test_empty_query_returns_everything():
    assert filter_projects(PROJECTS, "") == PROJECTS


def test_whitespace_query_is_not_trimmed():
    assert [p["id"] for p in filter_projects(PROJECTS, "   ")] == []
    assert [p["id"] for p in filter_projects(PROJECTS, " ")] == ["1", "3"]


def test_leading_space_is_part_of_the_query():
    assert [p["id"] for p in filter_projects(PROJECTS, " house")] == ["3"]
    assert filter_projects(PROJECTS, " garden") == []


def test_no_match():
    assert filter_projects(PROJECTS, "zzz") == []


def test_group_tasks_by_status_keeps_order():
    tasks = [
        {"id": "a", "status": "completed"},
        {"id": "b", "status": "todo"},
        {"id": "c", "status": "inProgress"},
        {"id": "d", "status": "todo"},
    ]
    columns = group_tasks_by_status(tasks)

    assert tuple(columns) == STATUS_COLUMNS
    assert [t["id"] for t in columns["todo"]] == ["b", "d"]
    assert [t["id"] for t in columns["inProgress"]] == ["c"]
    assert [t["id"] for t in columns["completed"]] == ["a"]


def test_group_empty_has_all_columns():
    assert group_tasks_by_status([]) == {"todo": [], "inProgress": [], "completed": []}
