"""Authentication endpoints."""

from fastapi import APIRouter, status
from starlette.requests import Request

from src.taskboard.api.dependencies import AuthServiceDep, CurrentUser
from src.taskboard.core.rate_limit import limiter
from src.taskboard.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from src.taskboard.schemas.user import UserRead

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {
            "description": "User created",
            "content": {
                "application/json": {
                    "example": {
                        "id": "550e8400-e29b-41d4-a716-446655440000",
                        "name": "Ada",
                        "email": "ada@example.com",
                        "country": "UK",
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                    }
                }
            },
        },
        400: {"description": "User already exists or invalid input"},
    },
)
@limiter.limit("5/hour")
async def register(
    request: Request,
    register_data: RegisterRequest,
    service: AuthServiceDep,
) -> AuthResponse:
    """Register a new user and return a token for it."""
    return await service.register(
        name=register_data.name,
        email=register_data.email,
        password=register_data.password,
        country=register_data.country,
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={
        200: {"description": "Successful authentication"},
        401: {"description": "Invalid email or password"},
    },
)
@limiter.limit("10/minute")
async def login(request: Request, login_data: LoginRequest, service: AuthServiceDep) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    return await service.authenticate(login_data.email, login_data.password)


@router.get(
    "/profile",
    response_model=UserRead,
    responses={
        200: {"description": "Current user's public fields"},
        401: {"description": "Missing or invalid token"},
        404: {"description": "User not found"},
    },
)
async def profile(user: CurrentUser, service: AuthServiceDep) -> UserRead:
    """Public fields of the authenticated user."""
    return await service.get_profile(user.id)
