"""Application commands (write operations)."""

from userhub.application.commands.user import (
    CreateUserCommand,
    DeleteUserCommand,
    LoginResult,
    LoginUserCommand,
    UpdateUserCommand,
)

__all__ = [
    "CreateUserCommand",
    "DeleteUserCommand",
    "LoginResult",
    "LoginUserCommand",
    "UpdateUserCommand",
]
