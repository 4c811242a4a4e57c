"""Database utilities - engine, session, schema creation."""

from src.taskboard.core.db.engine import dispose_engine, get_engine, init_db
from src.taskboard.core.db.session import get_session

__all__ = [
    # Engine
    "dispose_engine",
    "get_engine",
    "init_db",
    # Session
    "get_session",
]
