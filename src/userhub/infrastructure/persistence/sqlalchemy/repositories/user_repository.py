"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Union

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from userhub.domain.shared.exceptions import ConcurrencyError
from userhub.domain.user import (
    Email,
    User,
    UserAlreadyExistsError,
    UserRepository,
)
from userhub.infrastructure.persistence.sqlalchemy.models import MAX_USER_ID, UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> User | None:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_all(self, page: int = 1, per_page: int = 15) -> list[User]:
        stmt = (
            select(UserModel)
            .order_by(UserModel.id)
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()
        return [self._map_to_domain(model) for model in models]

    async def save(self, user: User) -> User:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                model = self._map_to_model(user)
                self._session.add(model)
                logger.debug("Inserted user: %s (email: %s)", user.id, user.email)

            await self._session.flush()
        except IntegrityError as e:
            # The unique index on users.email names the column on every backend
            if "email" in str(e.orig).lower():
                raise UserAlreadyExistsError(user.email) from e
            raise ConcurrencyError(
                f"User {user.id} was written by a concurrent request",
                details={"user_id": user.id},
            ) from e

        return user

    async def delete(self, user_id: int) -> None:
        model = await self._find_model_by_id(user_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.debug("Deleted user: %s", user_id)

    async def next_id(self) -> int:
        stmt = select(func.max(UserModel.id))
        result = await self._session.execute(stmt)
        current = result.scalar_one_or_none()
        return (current or 0) + 1

    async def _find_model_by_id(self, user_id: int) -> UserModel | None:
        # Ids the column cannot hold can never have been stored
        if not 0 < user_id <= MAX_USER_ID:
            return None

        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            email_verified_at=model.email_verified_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            email_verified_at=user.email_verified_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
        model.password_hash = user.password_hash
        model.email_verified_at = user.email_verified_at
        model.updated_at = user.updated_at
