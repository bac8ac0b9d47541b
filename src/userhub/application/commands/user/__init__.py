"""User commands - account lifecycle and login."""

from userhub.application.commands.user.create_user_command import (
    CreateUserCommand,
)
from userhub.application.commands.user.delete_user_command import (
    DeleteUserCommand,
)
from userhub.application.commands.user.login_user_command import (
    LoginResult,
    LoginUserCommand,
)
from userhub.application.commands.user.update_user_command import (
    UpdateUserCommand,
)

__all__ = [
    "CreateUserCommand",
    "DeleteUserCommand",
    "LoginResult",
    "LoginUserCommand",
    "UpdateUserCommand",
]
