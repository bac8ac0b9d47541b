from abc import ABC, abstractmethod
from datetime import datetime


class RevokedTokenRepository(ABC):
    """Deny-list of access tokens that were logged out before expiry."""

    @abstractmethod
    async def revoke(self, jti: str, user_id: int, expires_at: datetime) -> None:
        pass

    @abstractmethod
    async def is_revoked(self, jti: str) -> bool:
        pass

    @abstractmethod
    async def cleanup_expired(self) -> int:
        pass
