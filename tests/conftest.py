"""Root test fixtures shared across all test types.

Environment variables are set here, before any application import, so the
cached settings, the password hasher and the rate limiter all see them.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os
import tempfile
from pathlib import Path

# Set APP_ENV to testing before any app imports to disable rate limiting
os.environ.setdefault("APP_ENV", "testing")
_db_dir = Path(tempfile.mkdtemp(prefix="taskboard-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_db_dir / 'test.db'}")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("DATABASE_AUTO_CREATE", "false")
# Cheap hashing keeps the suite fast
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "1024")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import Generator

import pytest

from src.taskboard.core.config import get_settings

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def settings_override(monkeypatch: pytest.MonkeyPatch) -> Generator[pytest.MonkeyPatch]:
    """Set env vars for a test and rebuild the cached settings around it.

    Usage: ``settings_override.setenv("MAX_PROJECTS_PER_USER", "2")``
    """
    get_settings.cache_clear()
    yield monkeypatch
    monkeypatch.undo()
    get_settings.cache_clear()
