"""Auth schemas and data structures.

These are simple data classes used for transferring token
data between components.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The integer identifier of the user
    email
        The user's email address
    exp
        Token expiration timestamp
    token_type
        Always "access" for tokens issued by this service
    jti
        Unique token id, used to revoke the token on logout
    """

    user_id: int
    email: str
    exp: datetime
    token_type: str
    jti: str

    def is_access_token(self) -> bool:
        """Check if this is an access token."""
        return self.token_type == "access"
