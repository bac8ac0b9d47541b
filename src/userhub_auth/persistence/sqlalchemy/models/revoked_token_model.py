from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from userhub_auth.persistence.sqlalchemy.base import AuthBase


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class RevokedTokenModel(AuthBase):
    __tablename__ = "revoked_tokens"

    jti: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    revoked_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utc_now,
    )

    def __repr__(self) -> str:
        return f"<RevokedTokenModel(jti={self.jti}, user_id={self.user_id})>"
