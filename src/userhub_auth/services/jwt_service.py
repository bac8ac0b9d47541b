"""JWT token service.

Provides JWT access token creation and verification for authentication.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt

from userhub_auth.exceptions import InvalidTokenError
from userhub_auth.schemas import TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Every token carries a unique ``jti`` claim so a single token can be
    revoked on logout without touching the user's other sessions.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(42, "user@example.com")
    >>> payload = service.verify_token(token)
    >>> print(payload.user_id)
    42
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 1
    ALGORITHM = "HS256"
    TOKEN_TYPE = "Bearer"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until access token expires (default 1)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_expire_seconds(self) -> int:
        return int(self._access_expire.total_seconds())

    def create_access_token(
        self,
        user_id: int,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a short-lived access token.

        Parameters
        ----------
        user_id
            The user's identifier
        email
            The user's email address
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._access_expire)

        payload = {
            "sub": str(user_id),
            "email": email,
            "type": "access",
            "jti": uuid4().hex,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
            )

            return TokenPayload(
                user_id=int(payload["sub"]),
                email=payload["email"],
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                token_type=payload.get("type", "access"),
                jti=payload["jti"],
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
