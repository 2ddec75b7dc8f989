"""Mark notifications read use case."""

import logfire

from peerskill.application.usecase.base import ApiModel
from peerskill.domain.service import NotificationService
from peerskill.domain.value import Principal


class MarkReadRequest(ApiModel):
    """Mark read request."""

    ids: list[str]


class MarkReadResponse(ApiModel):
    """Mark read response."""

    status: str = "ok"
    updated: int


class MarkReadUseCase:
    """Use case for marking notifications as read.

    Only the caller's own notifications are touched unless the caller is
    an admin. Unknown IDs are ignored.
    """

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkReadRequest, caller: Principal
    ) -> MarkReadResponse:
        """Raises ValidationError if an ID is malformed."""
        with logfire.span("mark_read.execute", caller=caller.email):
            owner = None if caller.is_admin else caller.email
            updated = await self.notification_service.mark_read(request.ids, owner)
            return MarkReadResponse(updated=updated)
