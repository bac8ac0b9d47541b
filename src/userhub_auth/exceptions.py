"""Authentication exceptions.

These exceptions are raised by the userhub_auth package and are mapped
to HTTP responses by the presentation layer.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, revoked or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)
