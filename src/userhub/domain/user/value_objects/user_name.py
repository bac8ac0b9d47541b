"""UserName value object."""

from dataclasses import dataclass

from userhub.domain.user.exceptions import InvalidUserNameError

MAX_NAME_LENGTH = 255


@dataclass(frozen=True)
class UserName:
    """Display name of a user.

    The value is stored as given; only blank names and names longer
    than ``MAX_NAME_LENGTH`` characters are rejected.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            msg = "User name cannot be empty"
            raise InvalidUserNameError(msg)

        if len(self.value) > MAX_NAME_LENGTH:
            msg = f"User name cannot exceed {MAX_NAME_LENGTH} characters"
            raise InvalidUserNameError(msg)

    def __str__(self) -> str:
        return self.value
