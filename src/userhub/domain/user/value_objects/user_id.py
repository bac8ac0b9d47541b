"""UserId value object."""

from dataclasses import dataclass

from userhub.domain.user.exceptions import InvalidUserIdError


@dataclass(frozen=True)
class UserId:
    """Positive integer identity of a user."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True must not pass as id 1
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidUserIdError
        if self.value <= 0:
            raise InvalidUserIdError

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
