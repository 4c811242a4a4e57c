"""Security utilities - crypto and response headers.

Re-exports all security-related helpers for convenience.
"""

from src.taskboard.core.security.crypto import (
    ACCESS_TOKEN_TYPE,
    DUMMY_PASSWORD_HASH,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from src.taskboard.core.security.headers import SecurityHeadersMiddleware

__all__ = [
    # Crypto
    "ACCESS_TOKEN_TYPE",
    "DUMMY_PASSWORD_HASH",
    "create_access_token",
    "decode_token",
    "hash_password",
    "verify_password",
    # Middleware
    "SecurityHeadersMiddleware",
]
