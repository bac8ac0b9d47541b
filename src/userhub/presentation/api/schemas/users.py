"""User schemas for request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from userhub.domain.user import User


class UserResponse(BaseModel):
    """Public representation of a user. Never includes the password hash."""

    id: int
    name: str
    email: str
    email_verified_at: datetime | None
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            email_verified_at=user.email_verified_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class CreateUserRequest(BaseModel):
    """Request schema for creating a user."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8, description="At least 8 characters")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "email": "john@example.com",
                "password": "Secret123!",
            },
        },
    )


class UpdateUserRequest(BaseModel):
    """Request schema for updating a user. Omitted fields stay unchanged."""

    name: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = None
    password: str | None = Field(None, min_length=8)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Jane Doe"},
        },
    )


class PaginationMeta(BaseModel):
    page: int
    per_page: int
