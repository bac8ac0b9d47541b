"""User aggregate root."""

from datetime import datetime, timedelta
from typing import Union

from userhub.domain.shared.time import ensure_tz_aware, utc_now
from userhub.domain.user.value_objects import Email, UserId, UserName


class User:
    """
    User aggregate root.

    Holds identity, profile fields, the credential hash and lifecycle
    timestamps. Every mutation re-validates through the value objects and
    moves ``updated_at`` forward.
    """

    def __init__(
        self,
        id: Union[int, UserId],
        name: Union[str, UserName],
        email: Union[str, Email],
        password_hash: str,
        email_verified_at: datetime | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id if isinstance(id, UserId) else UserId(id)
        self._name = name if isinstance(name, UserName) else UserName(name)
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._email_verified_at = (
            ensure_tz_aware(email_verified_at) if email_verified_at else None
        )
        self._created_at = ensure_tz_aware(created_at) if created_at else None
        self._updated_at = ensure_tz_aware(updated_at) if updated_at else None

    @property
    def id(self) -> int:
        return self._id.value

    @property
    def user_id(self) -> UserId:
        return self._id

    @property
    def name(self) -> str:
        return self._name.value

    @property
    def name_obj(self) -> UserName:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def email_verified_at(self) -> datetime | None:
        return self._email_verified_at

    @property
    def is_email_verified(self) -> bool:
        return self._email_verified_at is not None

    @property
    def created_at(self) -> datetime | None:
        return self._created_at

    @property
    def updated_at(self) -> datetime | None:
        return self._updated_at

    def rename(self, name: Union[str, UserName]) -> None:
        self._name = name if isinstance(name, UserName) else UserName(name)
        self.touch()

    def change_email(self, email: Union[str, Email]) -> None:
        new_email = email if isinstance(email, Email) else Email(email)
        if new_email != self._email:
            # A new address has not been verified yet
            self._email_verified_at = None
        self._email = new_email
        self.touch()

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self.touch()

    def mark_email_verified(self, verified_at: datetime | None = None) -> None:
        self._email_verified_at = ensure_tz_aware(verified_at or utc_now())
        self.touch()

    def touch(self) -> None:
        """Advance ``updated_at`` to now, strictly past its previous value."""
        now = utc_now()
        if self._updated_at is not None and now <= self._updated_at:
            now = self._updated_at + timedelta(microseconds=1)
        self._updated_at = now

    @classmethod
    def create(
        cls,
        id: Union[int, UserId],
        name: Union[str, UserName],
        email: Union[str, Email],
        password_hash: str,
    ) -> "User":
        now = utc_now()
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstitute(
        cls,
        id: int,
        name: str,
        email: str,
        password_hash: str,
        email_verified_at: datetime | None,
        created_at: datetime | None,
        updated_at: datetime | None,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            email_verified_at=email_verified_at,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id.value}, email={self._email.value})"
