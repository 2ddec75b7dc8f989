"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from peerskill.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    email: str
    role: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def _secret(settings: AuthSettings) -> str:
    if settings.jwt_secret is None:
        raise JWTError("Signing key is not configured")
    return settings.jwt_secret.get_secret_value()


def create_token(email: str, role: str, settings: AuthSettings) -> str:
    """Create a JWT token binding an email to a role.

    Args:
        email: Account email
        role: Account role ("user" or "admin")
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(hours=settings.jwt_expiry_hours)

    payload = {
        "email": email,
        "role": role,
        "exp": expiry,
    }

    return jwt.encode(payload, _secret(settings), algorithm=settings.jwt_algorithm)


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
            token,
            _secret(settings),
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "email", "role"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
