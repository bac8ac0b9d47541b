"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from userhub.domain.user.aggregates.user import User
from userhub.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def find_all(self, page: int = 1, per_page: int = 15) -> list[User]:
        """Return one page of users ordered by id (pages start at 1)."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert the user, or replace the stored one with the same id."""

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """Delete a user by ID. Deleting an unknown id is a no-op."""

    @abstractmethod
    async def next_id(self) -> int:
        """Return the id for the next user (highest id + 1, starting at 1)."""
