"""SQLAlchemy implementation for userhub_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- RevokedTokenModel: SQLAlchemy model for logged-out tokens
- RevokedTokenRepositorySQLAlchemy: Repository implementation

Examples
--------
# Create auth tables next to the application tables:
from userhub_auth.persistence.sqlalchemy import AuthBase
await conn.run_sync(AuthBase.metadata.create_all)
"""

from userhub_auth.persistence.sqlalchemy.base import AuthBase
from userhub_auth.persistence.sqlalchemy.models import RevokedTokenModel
from userhub_auth.persistence.sqlalchemy.repositories import (
    RevokedTokenRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "RevokedTokenModel",
    "RevokedTokenRepositorySQLAlchemy",
]
