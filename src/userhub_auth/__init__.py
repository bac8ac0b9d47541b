"""UserHub Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the user domain. It handles:
- Password hashing (bcrypt)
- JWT access token creation and verification
- Revocation of tokens on logout (with pluggable persistence)

Architecture:
    userhub_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from userhub_auth import PasswordHashingService, JWTService
    from userhub_auth.persistence.sqlalchemy import (
        RevokedTokenRepositorySQLAlchemy,
        AuthBase,
    )
"""

from userhub_auth.exceptions import (
    AuthError,
    InvalidTokenError,
    WeakPasswordError,
)
from userhub_auth.repositories import RevokedTokenRepository
from userhub_auth.schemas import TokenPayload
from userhub_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Repositories (interfaces)
    "RevokedTokenRepository",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
]
