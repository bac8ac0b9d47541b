from userhub_auth.persistence.sqlalchemy.models.revoked_token_model import (
    RevokedTokenModel,
)

__all__ = ["RevokedTokenModel"]
