"""Notification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from peerskill.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkReadUseCase,
)
from peerskill.application.usecase.notification.list_notifications import (
    ListNotificationsRequest,
)
from peerskill.application.usecase.notification.mark_read import (
    MarkReadRequest,
    MarkReadResponse,
)
from peerskill.application.usecase.views import NotificationView
from peerskill.domain.service import AccessService
from peerskill.interface.api.security import BearerCredentials, token_of

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.post("", response_model=list[NotificationView])
async def list_notifications(
    request: ListNotificationsRequest,
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> list[NotificationView]:
    """A user's notifications, newest first. Self or admin."""
    caller = access_service.authenticate(token_of(credentials))
    return await list_notifications_use_case.execute(request, caller)


@router.post("/mark-read", response_model=MarkReadResponse)
async def mark_read(
    request: MarkReadRequest,
    mark_read_use_case: FromDishka[MarkReadUseCase],
    access_service: FromDishka[AccessService],
    credentials: BearerCredentials,
) -> MarkReadResponse:
    """Mark the caller's notifications as read.

    Example:
        POST /notifications/mark-read
        Authorization: Bearer ...
        {"ids": ["3f0c...", "9a12..."]}

        Response:
        {"status": "ok", "updated": 2}
    """
    caller = access_service.authenticate(token_of(credentials))
    return await mark_read_use_case.execute(request, caller)
