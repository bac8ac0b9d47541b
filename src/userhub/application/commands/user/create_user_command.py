"""Create a new user account."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from userhub.application.ports import EventPublisher
from userhub.domain.user import (
    Email,
    User,
    UserAlreadyExistsError,
    UserCreatedEvent,
    UserName,
    UserRepository,
)
from userhub_auth import PasswordHashingService

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Register a user with a freshly allocated id and a hashed password.

    A ``user.created`` event is published once the user is saved and, when a
    ``commit`` callable is given, committed. A failed publish is logged and
    does not undo the save.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        event_publisher: EventPublisher,
        commit: Optional[Callable[[], Awaitable[None]]] = None,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._event_publisher = event_publisher
        self._commit = commit

    async def execute(self, name: str, email: str, password: str) -> User:
        email_obj = Email(email)
        name_obj = UserName(name)

        if await self._user_repo.find_by_email(email_obj) is not None:
            raise UserAlreadyExistsError(email_obj.value)

        user_id = await self._user_repo.next_id()
        password_hash = self._password_service.hash(password)

        user = User.create(
            id=user_id,
            name=name_obj,
            email=email_obj,
            password_hash=password_hash,
        )
        saved = await self._user_repo.save(user)
        logger.info("Created user %s (%s)", saved.id, saved.email)

        # Publish only once the row is committed
        if self._commit is not None:
            await self._commit()

        await self._publish_created(saved)
        return saved

    async def _publish_created(self, user: User) -> None:
        event = UserCreatedEvent(user=user)
        try:
            await self._event_publisher.publish(event.event_type, event.to_dict())
        except Exception as e:
            logger.warning(
                "Failed to publish %s for user %s: %s",
                event.event_type,
                user.id,
                e,
            )
