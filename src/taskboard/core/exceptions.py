"""Domain errors and the handlers that render them as ``{"message": ...}`` bodies."""

import traceback

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.taskboard.core.config import get_settings
from src.taskboard.core.logging import get_logger

logger = get_logger(__name__)


class AppError(Exception):
    """Base class for errors that map directly to an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"
    headers: dict[str, str] | None = None

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class DuplicateEmailError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class ProjectLimitExceededError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"You can have a maximum of {limit} projects")


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authorized, token failed"
    headers = {"WWW-Authenticate": "Bearer"}


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not authorized to access this resource"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


def _error_body(message: str) -> dict[str, str | None]:
    return {"message": message, "request_id": correlation_id.get()}


def _format_validation_error(exc: RequestValidationError) -> str:
    """Collapse pydantic errors into a single ``field: reason`` message."""
    parts = []
    for error in exc.errors():
        loc = [str(p) for p in error.get("loc", ()) if p not in ("body", "query", "path")]
        field = ".".join(loc)
        parts.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))
    return "; ".join(parts) or "Invalid input"


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that render ``{message, request_id}`` bodies."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code, content=_error_body(exc.message), headers=exc.headers
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        error = InvalidInputError(_format_validation_error(exc))
        return JSONResponse(status_code=error.status_code, content=_error_body(error.message))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
            message = f"Not Found - {request.url.path}"
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(message),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        content: dict[str, str | None] = _error_body("Internal server error")
        if get_settings().debug:
            content["stack"] = "".join(traceback.format_exception(exc))
        return JSONResponse(status_code=500, content=content)
