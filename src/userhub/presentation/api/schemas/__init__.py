from userhub.presentation.api.schemas.auth import LoginData, LoginRequest
from userhub.presentation.api.schemas.common import (
    ApiResponse,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
)
from userhub.presentation.api.schemas.users import (
    CreateUserRequest,
    PaginationMeta,
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    "ApiResponse",
    "CreateUserRequest",
    "ErrorResponse",
    "HealthResponse",
    "LoginData",
    "LoginRequest",
    "MessageResponse",
    "PaginationMeta",
    "UpdateUserRequest",
    "UserResponse",
]
