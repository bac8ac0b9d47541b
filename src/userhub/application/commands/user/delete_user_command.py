"""Delete a user account."""

import logging

from userhub.domain.user import UserNotFoundError, UserRepository

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    """Hard-delete a user after checking that it exists."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: int) -> None:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        await self._user_repo.delete(user.id)
        logger.info("Deleted user %s", user_id)
