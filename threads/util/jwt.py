"""JWT token utilities.

The identity provider signs session tokens with a shared secret. The subject
claim (``sub``) carries the provider's user id, which is the user's external id
in this service.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, field_validator

from threads.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str  # External user id
    exp: datetime

    @field_validator("sub")
    @classmethod
    def validate_sub(cls, v: str) -> str:
        """Subject must name a user."""
        v = v.strip()
        if not v:
            raise ValueError("Token subject is empty")
        return v

    @property
    def external_id(self) -> str:
        """External user id carried by the token."""
        return self.sub


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(external_id: str, settings: AuthSettings) -> str:
    """Create a JWT token for a user.

    Production tokens come from the identity provider; this is used by local
    development tooling and tests.

    Args:
        external_id: External user id
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "sub": external_id,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
