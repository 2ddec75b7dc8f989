"""Access gate domain service.

Authentication (passwords, bearer tokens) and authorization (roles and
identity checks) for every protected operation.
"""

import hmac
from dataclasses import dataclass

import logfire

from peerskill.config import AuthSettings
from peerskill.domain.error import AuthError, ForbiddenError
from peerskill.domain.value import Principal, Role, same_email
from peerskill.util.jwt import JWTError
from peerskill.util.password import hash_password, verify_password

from .jwt_service import JWTService
from .user_service import UserService

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass
class LoginResult:
    """Successful login."""

    principal: Principal
    name: str
    token: str


class AccessService:
    """Domain service for authentication and authorization."""

    def __init__(
        self,
        auth_settings: AuthSettings,
        jwt_service: JWTService,
        user_service: UserService,
    ) -> None:
        """Initialize access service.

        Args:
            auth_settings: Authentication settings (admin pair, bcrypt cost)
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.auth_settings = auth_settings
        self.jwt_service = jwt_service
        self.user_service = user_service

    def hash_password(self, password: str) -> str:
        """Hash a password with the configured bcrypt cost."""
        return hash_password(password, self.auth_settings.bcrypt_rounds)

    def is_admin_email(self, email: str) -> bool:
        """Whether the email is the configured admin's, in any letter case."""
        admin_email = self.auth_settings.admin_email
        if admin_email is None:
            return False
        return same_email(email, admin_email)

    def _is_admin_login(self, email: str, password: str) -> bool:
        admin_email = self.auth_settings.admin_email
        admin_password = self.auth_settings.admin_password
        if admin_email is None or admin_password is None:
            return False
        email_ok = hmac.compare_digest(
            email.strip().lower().encode("utf-8"),
            admin_email.strip().lower().encode("utf-8"),
        )
        password_ok = hmac.compare_digest(
            password.encode("utf-8"),
            admin_password.get_secret_value().encode("utf-8"),
        )
        return email_ok and password_ok

    async def login(self, email: str, password: str) -> LoginResult:
        """Check credentials and issue a bearer token.

        The configured admin pair is checked before any store lookup.

        Args:
            email: Email, matched case-insensitively
            password: Plaintext password

        Returns:
            Principal, display name and signed token

        Raises:
            AuthError: If the credentials do not match
        """
        with logfire.span("access_service.login", email=email):
            if self._is_admin_login(email, password):
                principal = Principal(
                    email=self.auth_settings.admin_email, role=Role.ADMIN
                )
                name = self.auth_settings.admin_name
            else:
                user = await self.user_service.find_by_email(email)
                if not user or not verify_password(password, user.password_hash):
                    logfire.warn("Login failed", email=email)
                    raise AuthError(INVALID_CREDENTIALS)
                principal = Principal(email=user.email, role=Role.USER)
                name = user.name

            token = self.jwt_service.create_token(principal.email, principal.role.value)
            logfire.info("Login succeeded", email=principal.email, role=principal.role)
            return LoginResult(principal=principal, name=name, token=token)

    def authenticate(self, token: str | None) -> Principal:
        """Resolve the caller from a bearer token.

        Raises:
            AuthError: If the token is missing, invalid or expired
        """
        if not token:
            raise AuthError("Not authenticated")
        try:
            payload = self.jwt_service.verify_token(token)
            return Principal(email=payload.email, role=Role(payload.role))
        except JWTError as e:
            raise AuthError(str(e))
        except ValueError:
            raise AuthError("Invalid token")

    def authorize(self, principal: Principal, required_role: Role) -> None:
        """Require a role. Admins pass every role check.

        Raises:
            ForbiddenError: If the principal lacks the role
        """
        if principal.is_admin or principal.role == required_role:
            return
        logfire.warn(
            "Role check failed", email=principal.email, required=required_role.value
        )
        raise ForbiddenError(f"{required_role.value} role required")

    def ensure_self(self, principal: Principal, email: str) -> None:
        """Require the caller to be the given email.

        Raises:
            ForbiddenError: If the caller is someone else
        """
        if not same_email(principal.email, email):
            logfire.warn("Identity mismatch", caller=principal.email, claimed=email)
            raise ForbiddenError("You can only act on your own account")

    def ensure_self_or_admin(self, principal: Principal, email: str) -> None:
        """Require the caller to be the given email or an admin.

        Raises:
            ForbiddenError: If the caller is someone else and not an admin
        """
        if principal.is_admin:
            return
        self.ensure_self(principal, email)
