"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from peerskill.domain.model.notification import Notification
from peerskill.domain.value import NotificationId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create)."""
        pass

    @abstractmethod
    async def find_by_recipient(self, email: str) -> List[Notification]:
        """Find notifications for a recipient, newest first."""
        pass

    @abstractmethod
    async def mark_read(
        self,
        notification_ids: Sequence[NotificationId],
        recipient_email: Optional[str] = None,
    ) -> int:
        """Mark unread notifications as read.

        Args:
            notification_ids: Notifications to mark
            recipient_email: Only touch notifications owned by this email.
                None touches any recipient.

        Returns:
            Number of notifications that flipped from unread to read
        """
        pass

    @abstractmethod
    async def delete_by_recipient(self, email: str) -> int:
        """Delete every notification for a recipient.

        Returns:
            Number of deleted notifications
        """
        pass
