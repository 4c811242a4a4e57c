"""Test helper functions for common data creation patterns."""

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.taskboard.core.security import create_access_token
from src.taskboard.models import Project, Task, User
from tests.factories import DEFAULT_TEST_PASSWORD, ProjectFactory, TaskFactory, UserFactory


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def create_user(session: AsyncSession, **user_kwargs) -> User:
    """Create a user directly in the database.

    Args:
        session: Database session
        **user_kwargs: Args passed to UserFactory

    Returns:
        Created user (password is DEFAULT_TEST_PASSWORD)
    """
    user = UserFactory.build(**user_kwargs)
    session.add(user)
    await session.flush()
    return user


async def create_project_with_tasks(
    session: AsyncSession,
    owner: User,
    task_count: int = 0,
    **project_kwargs,
) -> tuple[Project, list[Task]]:
    """Create a project and ``task_count`` tasks referenced from it, in order.

    Returns:
        Tuple of (project, tasks)
    """
    project = ProjectFactory.build(owner_id=owner.id, **project_kwargs)
    session.add(project)
    await session.flush()

    tasks = [
        TaskFactory.build(project_id=project.id, user_id=owner.id) for _ in range(task_count)
    ]
    session.add_all(tasks)
    project.task_ids = [str(task.id) for task in tasks]
    await session.flush()

    return project, tasks


async def register(
    client: AsyncClient,
    email: str,
    password: str = DEFAULT_TEST_PASSWORD,
    name: str = "Test User",
    country: str = "Norway",
) -> dict:
    """Register through the API and return the response body (includes ``token``)."""
    response = await client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password, "country": country},
    )
    assert response.status_code == 201, response.text
    return response.json()


def token_for(user: User) -> str:
    return create_access_token(user.id)
