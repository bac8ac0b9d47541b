"""SQLAlchemy implementation of RevokedTokenRepository."""

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from userhub_auth.persistence.sqlalchemy.models import RevokedTokenModel
from userhub_auth.repositories import RevokedTokenRepository

logger = logging.getLogger(__name__)


class RevokedTokenRepositorySQLAlchemy(RevokedTokenRepository):
    """Stores revoked token ids until their natural expiry."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def revoke(self, jti: str, user_id: int, expires_at: datetime) -> None:
        existing = await self._session.get(RevokedTokenModel, jti)
        if existing is not None:
            return

        self._session.add(
            RevokedTokenModel(
                jti=jti,
                user_id=user_id,
                expires_at=expires_at,
            ),
        )
        await self._session.flush()
        logger.debug("Revoked token %s for user %s", jti, user_id)

    async def is_revoked(self, jti: str) -> bool:
        stmt = select(RevokedTokenModel.jti).where(RevokedTokenModel.jti == jti)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def cleanup_expired(self) -> int:
        """Drop entries whose token would be rejected as expired anyway."""
        stmt = (
            delete(RevokedTokenModel)
            .where(RevokedTokenModel.expires_at < datetime.now(tz=timezone.utc))
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        count = result.rowcount or 0
        if count:
            logger.info("Removed %d expired revoked tokens", count)
        return count
