"""SQLAlchemy persistence for the user domain."""

from userhub.infrastructure.persistence.sqlalchemy.models import Base, UserModel
from userhub.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = ["Base", "UserModel", "UserRepositorySQLAlchemy"]
