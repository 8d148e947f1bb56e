"""JWT token domain service."""

import logfire

from threads.config import AuthSettings
from threads.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for verifying identity provider tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, external_id: str) -> str:
        """Create a JWT token for an external user id.

        Only used for development and tests; production tokens are issued
        by the identity provider.

        Args:
            external_id: External user id

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", external_id=external_id):
            return create_token(external_id, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", external_id=payload.external_id)
                return payload
            except Exception as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

