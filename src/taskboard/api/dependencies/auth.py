"""Authorization gate: resolve the bearer token to a live user."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header

from src.taskboard.api.dependencies.repositories import UserRepo
from src.taskboard.core.exceptions import UnauthorizedError
from src.taskboard.core.logging import bind_user_context
from src.taskboard.core.security import ACCESS_TOKEN_TYPE, decode_token
from src.taskboard.models import User


async def get_current_user(
    user_repo: UserRepo,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Validate the access token and return the user it names.

    The user is re-read from the database on every request, so a removed
    account stops working immediately even while its token is unexpired.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise UnauthorizedError("Not authorized, no token")

    token = authorization[7:].strip()
    if not token:
        raise UnauthorizedError("Not authorized, no token")

    payload = decode_token(token)
    if payload is None or payload.get("type") != ACCESS_TOKEN_TYPE:
        raise UnauthorizedError("Not authorized, token failed")

    try:
        user_id = UUID(str(payload.get("sub")))
    except ValueError as e:
        raise UnauthorizedError("Not authorized, token failed") from e

    user = await user_repo.get_by_id(user_id)
    if user is None:
        raise UnauthorizedError("Not authorized, user not found")

    bind_user_context(user.id, user.email)
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
