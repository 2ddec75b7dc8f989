"""List notifications use case."""

from pydantic import Field

from peerskill.application.usecase.base import ApiModel
from peerskill.application.usecase.views import NotificationView
from peerskill.domain.service import AccessService, NotificationService
from peerskill.domain.value import Principal


class ListNotificationsRequest(ApiModel):
    """List notifications request."""

    email: str = Field(min_length=1)


class ListNotificationsUseCase:
    """Use case for reading a user's notifications, newest first.

    Users read their own; admins may read anyone's.
    """

    def __init__(
        self,
        access_service: AccessService,
        notification_service: NotificationService,
    ) -> None:
        self.access_service = access_service
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest, caller: Principal
    ) -> list[NotificationView]:
        self.access_service.ensure_self_or_admin(caller, request.email)
        notifications = await self.notification_service.list_for(request.email)
        return [NotificationView.from_notification(n) for n in notifications]
