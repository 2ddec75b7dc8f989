"""Domain layer DI providers."""

from dishka import Scope, provide

from peerskill.config import (
    AuthSettings,
    MatchingSettings,
    ReputationSettings,
    SessionSettings,
)
from peerskill.domain.repository import (
    NotificationRepository,
    SessionRepository,
    SkillRequestRepository,
    UserRepository,
)
from peerskill.domain.service import (
    AccessService,
    JWTService,
    MatchingService,
    NotificationService,
    ReputationService,
    SessionService,
    SkillRequestService,
    UserService,
)
from peerskill.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        skill_request_repository: SkillRequestRepository,
        session_repository: SessionRepository,
        notification_repository: NotificationRepository,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            skill_request_repository=skill_request_repository,
            session_repository=session_repository,
            notification_repository=notification_repository,
        )

    @provide
    def get_access_service(
        self,
        auth_settings: AuthSettings,
        jwt_service: JWTService,
        user_service: UserService,
    ) -> AccessService:
        """Provide access gate domain service."""
        return AccessService(
            auth_settings=auth_settings,
            jwt_service=jwt_service,
            user_service=user_service,
        )

    @provide
    def get_matching_service(
        self, user_repository: UserRepository, matching_settings: MatchingSettings
    ) -> MatchingService:
        """Provide matching domain service."""
        return MatchingService(
            user_repository=user_repository, matching_settings=matching_settings
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_reputation_service(
        self,
        user_repository: UserRepository,
        notification_service: NotificationService,
        reputation_settings: ReputationSettings,
    ) -> ReputationService:
        """Provide reputation domain service."""
        return ReputationService(
            user_repository=user_repository,
            notification_service=notification_service,
            reputation_settings=reputation_settings,
        )

    @provide
    def get_session_service(
        self,
        session_repository: SessionRepository,
        user_service: UserService,
        notification_service: NotificationService,
        session_settings: SessionSettings,
    ) -> SessionService:
        """Provide session domain service."""
        return SessionService(
            session_repository=session_repository,
            user_service=user_service,
            notification_service=notification_service,
            session_settings=session_settings,
        )

    @provide
    def get_skill_request_service(
        self,
        skill_request_repository: SkillRequestRepository,
        user_service: UserService,
    ) -> SkillRequestService:
        """Provide skill request domain service."""
        return SkillRequestService(
            skill_request_repository=skill_request_repository,
            user_service=user_service,
        )
