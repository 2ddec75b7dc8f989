"""JWT token domain service."""

import logfire

from peerskill.config import AuthSettings
from peerskill.util.jwt import JWTError, TokenPayload, create_token, verify_token


class JWTService:
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, email: str, role: str) -> str:
        """Create JWT token for an account.

        Args:
            email: Account email
            role: Account role

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", email=email, role=role):
            token = create_token(email, role, self.auth_settings)
            logfire.info("JWT token created", email=email, role=role)
            return token

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
                logfire.debug(
                    "JWT token verified", email=payload.email, role=payload.role
                )
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
