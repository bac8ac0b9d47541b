"""Update a user's profile with partial fields."""

from __future__ import annotations

import logging
from typing import Optional

from userhub.domain.user import (
    Email,
    EmailAlreadyTakenError,
    User,
    UserName,
    UserNotFoundError,
    UserRepository,
)
from userhub_auth import PasswordHashingService

logger = logging.getLogger(__name__)


class UpdateUserCommand:
    """Apply any of name, email and password to an existing user.

    ``updated_at`` moves forward even when no field is given.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    async def execute(
        self,
        user_id: int,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        # Validate everything before the first mutation
        name_obj = UserName(name) if name is not None else None
        email_obj = Email(email) if email is not None else None
        if email_obj is not None:
            owner = await self._user_repo.find_by_email(email_obj)
            if owner is not None and owner.id != user.id:
                raise EmailAlreadyTakenError(email_obj.value)
        password_hash = (
            self._password_service.hash(password) if password is not None else None
        )

        if name_obj is not None:
            user.rename(name_obj)
        if email_obj is not None:
            user.change_email(email_obj)
        if password_hash is not None:
            user.change_password_hash(password_hash)
        user.touch()

        saved = await self._user_repo.save(user)
        logger.info("Updated user %s", saved.id)
        return saved
