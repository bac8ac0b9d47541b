"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from userhub.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError, ValueError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message,
            code=ErrorCode.INVALID_EMAIL,
            details={"field": "email"},
        )


class InvalidUserNameError(ValidationError, ValueError):
    """Raised when a user name is blank or too long."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message,
            code=ErrorCode.INVALID_USER_NAME,
            details={"field": "name"},
        )


class InvalidUserIdError(ValidationError, ValueError):
    """Raised when a user id is not a positive integer."""

    def __init__(self, message: str = "User ID must be a positive integer") -> None:
        super().__init__(
            message,
            code=ErrorCode.INVALID_USER_ID,
            details={"field": "id"},
        )


class UserAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"User with email {email} already exists",
            code=ErrorCode.USER_ALREADY_EXISTS,
            details={"email": email},
        )


class EmailAlreadyTakenError(ValidationError):
    """Email belongs to another user (raised when updating a user)."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email {email} is already taken",
            code=ErrorCode.EMAIL_ALREADY_TAKEN,
            details={"field": "email"},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(
            f"User with ID {user_id} not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class InvalidCredentialsError(DomainException):
    """Email unknown or password mismatch.

    The message is identical for both causes so callers cannot tell
    which accounts exist.
    """

    def __init__(self) -> None:
        super().__init__(
            "Invalid email or password",
            code=ErrorCode.INVALID_CREDENTIALS,
        )
