"""FastAPI dependency injection for the UserHub API.

Provides dependencies for:
- Database sessions
- Authentication (current user and access token from JWT)
- Ports and services (repositories, password hashing, event publishing)
- Use cases, built with their ports injected through the constructor
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from userhub.application.commands import (
    CreateUserCommand,
    DeleteUserCommand,
    LoginUserCommand,
    UpdateUserCommand,
)
from userhub.application.ports import EventPublisher
from userhub.application.queries import GetUserQuery, ListUsersQuery
from userhub.domain.user import User, UserRepository
from userhub.infrastructure.messaging import create_event_publisher
from userhub.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy
from userhub.presentation.api.config import get_api_settings
from userhub_auth import (
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    RevokedTokenRepository,
    TokenPayload,
)
from userhub_auth.persistence.sqlalchemy import RevokedTokenRepositorySQLAlchemy
from userhub_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_settings().database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Routers commit on success. A session closed without commit rolls back.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Ports & Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


@lru_cache(maxsize=1)
def get_event_publisher() -> EventPublisher:
    """Get the shared event publisher (singleton).

    Events go to RabbitMQ when RABBITMQ_ENABLED is set, otherwise they
    are only logged.
    """
    return create_event_publisher(get_settings())


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepositorySQLAlchemy(session)


def get_revoked_token_repository(session: DBSession) -> RevokedTokenRepository:
    return RevokedTokenRepositorySQLAlchemy(session)


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]
EventPublisherDep = Annotated[EventPublisher, Depends(get_event_publisher)]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
RevokedTokensDep = Annotated[
    RevokedTokenRepository,
    Depends(get_revoked_token_repository),
]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_access_token(
    jwt_service: JWTServiceDep,
    revoked_tokens: RevokedTokensDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> TokenPayload:
    """
    FastAPI dependency returning the verified access token of the request.

    Raises
    ------
    HTTPException
        401 if the token is missing, invalid, expired or revoked
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    if not payload.is_access_token() or await revoked_tokens.is_revoked(payload.jti):
        logger.warning("Rejected token %s for user %s", payload.jti, payload.user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return payload


AccessToken = Annotated[TokenPayload, Depends(get_access_token)]


async def get_current_user(
    token: AccessToken,
    user_repository: UserRepositoryDep,
) -> User:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Raises
    ------
    HTTPException
        401 if the token's user no longer exists
    """
    user = await user_repository.find_by_id(token.user_id)

    if user is None:
        logger.warning("User not found for token: %s", token.user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


# Type alias for injected current user
CurrentUser = Annotated[User, Depends(get_current_user)]


# -----------------------------------------------------------------------------
# Use Cases
# -----------------------------------------------------------------------------


def get_create_user_command(
    session: DBSession,
    user_repository: UserRepositoryDep,
    password_service: PasswordServiceDep,
    event_publisher: EventPublisherDep,
) -> CreateUserCommand:
    return CreateUserCommand(
        user_repository=user_repository,
        password_service=password_service,
        event_publisher=event_publisher,
        commit=session.commit,
    )


def get_update_user_command(
    user_repository: UserRepositoryDep,
    password_service: PasswordServiceDep,
) -> UpdateUserCommand:
    return UpdateUserCommand(
        user_repository=user_repository,
        password_service=password_service,
    )


def get_delete_user_command(user_repository: UserRepositoryDep) -> DeleteUserCommand:
    return DeleteUserCommand(user_repository=user_repository)


def get_login_user_command(
    user_repository: UserRepositoryDep,
    password_service: PasswordServiceDep,
) -> LoginUserCommand:
    return LoginUserCommand(
        user_repository=user_repository,
        password_service=password_service,
    )


def get_get_user_query(user_repository: UserRepositoryDep) -> GetUserQuery:
    return GetUserQuery(user_repository=user_repository)


def get_list_users_query(
    user_repository: UserRepositoryDep,
    settings: SettingsDep,
) -> ListUsersQuery:
    return ListUsersQuery(
        user_repository=user_repository,
        max_per_page=settings.users_max_per_page,
    )


CreateUserCommandDep = Annotated[CreateUserCommand, Depends(get_create_user_command)]
UpdateUserCommandDep = Annotated[UpdateUserCommand, Depends(get_update_user_command)]
DeleteUserCommandDep = Annotated[DeleteUserCommand, Depends(get_delete_user_command)]
LoginUserCommandDep = Annotated[LoginUserCommand, Depends(get_login_user_command)]
GetUserQueryDep = Annotated[GetUserQuery, Depends(get_get_user_query)]
ListUsersQueryDep = Annotated[ListUsersQuery, Depends(get_list_users_query)]
