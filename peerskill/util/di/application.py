"""Application layer DI providers."""

from dishka import Scope, provide

from peerskill.application.usecase.admin import (
    DeleteUserUseCase,
    ListRequestsUseCase,
    ListSessionsUseCase,
    ListUsersUseCase,
    UpdatePointsUseCase,
)
from peerskill.application.usecase.auth import LoginUseCase, SignupUseCase
from peerskill.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkReadUseCase,
)
from peerskill.application.usecase.peer import (
    LeaderboardUseCase,
    RandomPeersUseCase,
    RecommendUseCase,
    SearchPeersUseCase,
)
from peerskill.application.usecase.reputation import RatePeerUseCase
from peerskill.application.usecase.request import RequestSkillUseCase
from peerskill.application.usecase.session import (
    MySessionsUseCase,
    ScheduleSessionUseCase,
)
from peerskill.application.usecase.user import (
    GetProfileUseCase,
    UpdateProfileUseCase,
)
from peerskill.domain.service import (
    AccessService,
    MatchingService,
    NotificationService,
    ReputationService,
    SessionService,
    SkillRequestService,
    UserService,
)
from peerskill.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(
        self, access_service: AccessService, user_service: UserService
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(access_service=access_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(self, access_service: AccessService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(access_service=access_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(self, user_service: UserService) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, access_service: AccessService, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(
            access_service=access_service, user_service=user_service
        )

    # Peer use cases
    @provide(scope=Scope.REQUEST)
    def get_recommend_use_case(
        self, matching_service: MatchingService
    ) -> RecommendUseCase:
        """Provide recommend use case."""
        return RecommendUseCase(matching_service=matching_service)

    @provide(scope=Scope.REQUEST)
    def get_random_peers_use_case(
        self, matching_service: MatchingService
    ) -> RandomPeersUseCase:
        """Provide random peers use case."""
        return RandomPeersUseCase(matching_service=matching_service)

    @provide(scope=Scope.REQUEST)
    def get_search_peers_use_case(
        self, matching_service: MatchingService
    ) -> SearchPeersUseCase:
        """Provide search peers use case."""
        return SearchPeersUseCase(matching_service=matching_service)

    @provide(scope=Scope.REQUEST)
    def get_leaderboard_use_case(
        self, matching_service: MatchingService
    ) -> LeaderboardUseCase:
        """Provide leaderboard use case."""
        return LeaderboardUseCase(matching_service=matching_service)

    # Reputation use cases
    @provide(scope=Scope.REQUEST)
    def get_rate_peer_use_case(
        self, reputation_service: ReputationService
    ) -> RatePeerUseCase:
        """Provide rate peer use case."""
        return RatePeerUseCase(reputation_service=reputation_service)

    # Request use cases
    @provide(scope=Scope.REQUEST)
    def get_request_skill_use_case(
        self,
        access_service: AccessService,
        skill_request_service: SkillRequestService,
    ) -> RequestSkillUseCase:
        """Provide request skill use case."""
        return RequestSkillUseCase(
            access_service=access_service,
            skill_request_service=skill_request_service,
        )

    # Session use cases
    @provide(scope=Scope.REQUEST)
    def get_schedule_session_use_case(
        self, access_service: AccessService, session_service: SessionService
    ) -> ScheduleSessionUseCase:
        """Provide schedule session use case."""
        return ScheduleSessionUseCase(
            access_service=access_service, session_service=session_service
        )

    @provide(scope=Scope.REQUEST)
    def get_my_sessions_use_case(
        self, access_service: AccessService, session_service: SessionService
    ) -> MySessionsUseCase:
        """Provide my sessions use case."""
        return MySessionsUseCase(
            access_service=access_service, session_service=session_service
        )

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self,
        access_service: AccessService,
        notification_service: NotificationService,
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(
            access_service=access_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkReadUseCase:
        """Provide mark read use case."""
        return MarkReadUseCase(notification_service=notification_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(
        self, access_service: AccessService, user_service: UserService
    ) -> ListUsersUseCase:
        """Provide admin list users use case."""
        return ListUsersUseCase(access_service=access_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_requests_use_case(
        self,
        access_service: AccessService,
        skill_request_service: SkillRequestService,
    ) -> ListRequestsUseCase:
        """Provide admin list requests use case."""
        return ListRequestsUseCase(
            access_service=access_service,
            skill_request_service=skill_request_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_sessions_use_case(
        self, access_service: AccessService, session_service: SessionService
    ) -> ListSessionsUseCase:
        """Provide admin list sessions use case."""
        return ListSessionsUseCase(
            access_service=access_service, session_service=session_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(
        self, access_service: AccessService, user_service: UserService
    ) -> DeleteUserUseCase:
        """Provide admin delete user use case."""
        return DeleteUserUseCase(
            access_service=access_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_points_use_case(
        self,
        access_service: AccessService,
        reputation_service: ReputationService,
    ) -> UpdatePointsUseCase:
        """Provide admin update points use case."""
        return UpdatePointsUseCase(
            access_service=access_service, reputation_service=reputation_service
        )
