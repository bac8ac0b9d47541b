"""Query to list users page by page."""

from userhub.domain.shared.exceptions import ErrorCode, ValidationError
from userhub.domain.user import User, UserRepository

DEFAULT_PER_PAGE = 15
MAX_PER_PAGE = 100


class ListUsersQuery:
    """Return one page of users ordered by id.

    No total count is computed; callers build pagination metadata from the
    page and page size they asked for.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        max_per_page: int = MAX_PER_PAGE,
    ) -> None:
        self._user_repo = user_repository
        self._max_per_page = max_per_page

    async def execute(
        self,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> list[User]:
        if page < 1:
            raise ValidationError(
                "Page must be at least 1",
                code=ErrorCode.INVALID_PAGINATION,
                details={"field": "page"},
            )
        if not 1 <= per_page <= self._max_per_page:
            raise ValidationError(
                f"Page size must be between 1 and {self._max_per_page}",
                code=ErrorCode.INVALID_PAGINATION,
                details={"field": "per_page"},
            )
        return await self._user_repo.find_all(page=page, per_page=per_page)
