"""Query to get a single user by id."""

from userhub.domain.user import User, UserNotFoundError, UserRepository


class GetUserQuery:
    """Query to retrieve a user by id."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repo = user_repository

    async def execute(self, user_id: int) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
