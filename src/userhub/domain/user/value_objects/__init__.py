"""User value objects."""

from userhub.domain.user.value_objects.email import Email
from userhub.domain.user.value_objects.user_id import UserId
from userhub.domain.user.value_objects.user_name import UserName

__all__ = ["Email", "UserId", "UserName"]
