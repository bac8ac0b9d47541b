"""SQLAlchemy model for User aggregate."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from userhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

# Upper bound of the 32-bit INTEGER id column
MAX_USER_ID = 2**31 - 1


class UserModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting User aggregates.

    Ids are allocated by the application (highest id + 1), so the primary
    key carries no autoincrement.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    email_verified_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
