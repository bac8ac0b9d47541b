"""User domain manages user identity and profile.

This domain handles:
- User aggregate (id, name, email, credential hash, timestamps)
- Self-validating value objects for each scalar
- The user.created domain event
"""

from userhub.domain.user.aggregates import User
from userhub.domain.user.events import UserCreatedEvent
from userhub.domain.user.exceptions import (
    EmailAlreadyTakenError,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidUserIdError,
    InvalidUserNameError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from userhub.domain.user.repositories import UserRepository
from userhub.domain.user.value_objects import Email, UserId, UserName

__all__ = [
    "Email",
    "EmailAlreadyTakenError",
    "InvalidCredentialsError",
    "InvalidEmailError",
    "InvalidUserIdError",
    "InvalidUserNameError",
    "User",
    "UserAlreadyExistsError",
    "UserCreatedEvent",
    "UserId",
    "UserName",
    "UserNotFoundError",
    "UserRepository",
]
