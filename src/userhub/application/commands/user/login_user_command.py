"""Authenticate a user by email and password."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from userhub.domain.user import (
    Email,
    InvalidCredentialsError,
    InvalidEmailError,
    User,
    UserRepository,
)
from userhub_auth import PasswordHashingService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    user: User
    message: str = "Login successful"


class LoginUserCommand:
    """Check credentials and return the matching user.

    Token issuance is left to the caller. Unknown email and wrong password
    fail with the same error so accounts cannot be enumerated.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    async def execute(self, email: str, password: str) -> LoginResult:
        try:
            email_obj = Email(email)
        except InvalidEmailError as e:
            raise InvalidCredentialsError from e

        user = await self._user_repo.find_by_email(email_obj)
        if user is None:
            logger.info("Login failed: unknown email")
            raise InvalidCredentialsError

        if not self._password_service.verify(password, user.password_hash):
            logger.info("Login failed: wrong password for user %s", user.id)
            raise InvalidCredentialsError

        logger.info("User %s logged in", user.id)
        return LoginResult(user=user)
