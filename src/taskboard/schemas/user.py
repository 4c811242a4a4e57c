from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr
from pydantic.alias_generators import to_camel


class UserRead(BaseModel):
    """Public view of a user. The password hash never leaves the service."""

    id: UUID
    name: str
    email: EmailStr
    country: str

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )
