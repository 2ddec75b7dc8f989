"""Signup use case."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import Field, field_validator

from peerskill.application.usecase.base import ApiModel, strip_required
from peerskill.domain.error import ConflictError
from peerskill.domain.model import User
from peerskill.domain.service import AccessService, UserService
from peerskill.domain.value import UserId
from peerskill.util.password import MAX_PASSWORD_BYTES, password_fits


class SignupRequest(ApiModel):
    """Signup request.

    Text limits follow the users table columns.
    """

    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=255)
    contact: str | None = Field(default=None, max_length=255)
    password: str = Field(min_length=1)
    teach: list[str] = Field(default_factory=list)
    learn: list[str] = Field(default_factory=list)
    study_year: str | None = Field(default=None, max_length=50)
    branch: str | None = Field(default=None, max_length=255)
    avatar: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return strip_required(value, "Name is required")

    @field_validator("email")
    @classmethod
    def email_shape(cls, value: str) -> str:
        value = value.strip()
        local, _, domain = value.partition("@")
        if not local or not domain:
            raise ValueError("Invalid email address")
        return value

    @field_validator("password")
    @classmethod
    def password_length(cls, value: str) -> str:
        if not password_fits(value):
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class SignupResponse(ApiModel):
    """Signup response."""

    user_id: str
    email: str


class SignupUseCase:
    """Use case for creating an account with a hashed password."""

    def __init__(self, access_service: AccessService, user_service: UserService) -> None:
        """Initialize signup use case.

        Args:
            access_service: Access gate domain service (password hashing)
            user_service: User domain service
        """
        self.access_service = access_service
        self.user_service = user_service

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Execute signup flow.

        Raises:
            ConflictError: If the email is already registered or is the
                configured admin email
        """
        with logfire.span("signup.execute", email=request.email):
            if self.access_service.is_admin_email(request.email):
                logfire.warn("Signup with the admin email", email=request.email)
                raise ConflictError(f"User already exists: {request.email}")

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                name=request.name,
                email=request.email,
                contact=request.contact,
                password_hash=self.access_service.hash_password(request.password),
                teach=request.teach,
                learn=request.learn,
                study_year=request.study_year,
                branch=request.branch,
                avatar=request.avatar,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_service.register(user)
            return SignupResponse(user_id=str(saved.id), email=saved.email)
