"""Repository interfaces for auth persistence."""

from userhub_auth.repositories.revoked_token_repository import (
    RevokedTokenRepository,
)

__all__ = ["RevokedTokenRepository"]
