"""Authentication schemas for request/response models."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from userhub.presentation.api.schemas.users import UserResponse


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "john@example.com",
                "password": "Secret123!",
            },
        },
    )


class LoginData(BaseModel):
    """Payload returned on successful login."""

    user: UserResponse
    access_token: str
    token_type: str
    expires_in: int = Field(..., description="Token lifetime in seconds")
