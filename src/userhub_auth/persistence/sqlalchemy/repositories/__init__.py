from userhub_auth.persistence.sqlalchemy.repositories.revoked_token_repository import (
    RevokedTokenRepositorySQLAlchemy,
)

__all__ = ["RevokedTokenRepositorySQLAlchemy"]
