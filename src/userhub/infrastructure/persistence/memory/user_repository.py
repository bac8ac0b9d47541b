"""
In-memory UserRepository for testing and development.

NOT FOR PRODUCTION USE - data is lost on restart.
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from userhub.domain.user import Email, User, UserRepository


class InMemoryUserRepository(UserRepository):
    """
    In-memory implementation of UserRepository.

    Stores detached copies so that changes to a loaded aggregate only
    become visible after ``save``, as with a database.
    """

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}  # user_id -> stored copy

    async def find_by_id(self, user_id: int) -> Optional[User]:
        stored = self._users.get(user_id)
        return _copy(stored) if stored else None

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        email_value = email.value if isinstance(email, Email) else Email(email).value
        for stored in self._users.values():
            if stored.email == email_value:
                return _copy(stored)
        return None

    async def find_all(self, page: int = 1, per_page: int = 15) -> list[User]:
        ordered = [self._users[key] for key in sorted(self._users)]
        start = (page - 1) * per_page
        return [_copy(user) for user in ordered[start : start + per_page]]

    async def save(self, user: User) -> User:
        self._users[user.id] = _copy(user)
        return user

    async def delete(self, user_id: int) -> None:
        self._users.pop(user_id, None)

    async def next_id(self) -> int:
        return max(self._users, default=0) + 1


def _copy(user: User) -> User:
    return User.reconstitute(
        id=user.id,
        name=user.name,
        email=user.email,
        password_hash=user.password_hash,
        email_verified_at=user.email_verified_at,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
