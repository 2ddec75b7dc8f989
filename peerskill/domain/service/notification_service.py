"""Notification domain service."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

import logfire

from peerskill.domain.error import ValidationError
from peerskill.domain.model import Notification
from peerskill.domain.repository import NotificationRepository
from peerskill.domain.value import NotificationId


class NotificationService:
    """Domain service for notification operations."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify(self, recipient_email: str, message: str) -> Notification:
        """Create an unread notification.

        Args:
            recipient_email: Recipient email
            message: Message text

        Returns:
            Created notification
        """
        notification = Notification(
            id=NotificationId(uuid4()),
            recipient_email=recipient_email,
            message=message,
            read=False,
            created_at=datetime.now(),
        )
        saved = await self.notification_repository.save(notification)
        logfire.info(
            "Notification created",
            notification_id=str(saved.id),
            recipient=recipient_email,
        )
        return saved

    async def list_for(self, email: str) -> list[Notification]:
        """List a recipient's notifications, newest first."""
        return await self.notification_repository.find_by_recipient(email)

    async def mark_read(
        self, notification_ids: list[str], owner_email: Optional[str]
    ) -> int:
        """Mark notifications as read.

        Args:
            notification_ids: Notification IDs as strings
            owner_email: Restrict to notifications owned by this email,
                or None to allow any recipient

        Returns:
            Number of notifications that flipped to read

        Raises:
            ValidationError: If an ID is not a valid UUID
        """
        try:
            ids = [NotificationId(UUID(value)) for value in notification_ids]
        except ValueError:
            raise ValidationError("Invalid notification id")

        if not ids:
            return 0

        with logfire.span(
            "notification_service.mark_read", count=len(ids), owner=owner_email
        ):
            updated = await self.notification_repository.mark_read(ids, owner_email)
            logfire.info("Notifications marked read", updated=updated)
            return updated
