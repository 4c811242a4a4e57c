from pydantic import BaseModel, EmailStr, Field, field_validator

from src.taskboard.schemas.user import UserRead


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("cannot be empty or whitespace only")
    return v


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=1, max_length=100)
    country: str = Field(min_length=1, max_length=100)

    @field_validator("name", "country")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        return _strip_required(v)


class LoginRequest(BaseModel):
    # Any string: a malformed email fails like an unknown one
    email: str
    password: str = Field(min_length=1)


class AuthResponse(UserRead):
    """Public user fields plus the bearer token to replay on later calls."""

    token: str
