"""In-memory notification repository for testing."""

from typing import List, Optional, Sequence

from peerskill.domain.model import Notification
from peerskill.domain.repository import NotificationRepository
from peerskill.domain.value import NotificationId, email_key

from .store import InMemoryStore, newest_first


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def save(self, notification: Notification) -> Notification:
        self._store.notifications[notification.id] = notification
        return notification

    async def find_by_recipient(self, email: str) -> List[Notification]:
        key = email_key(email)
        return newest_first(
            [
                n
                for n in self._store.notifications.values()
                if email_key(n.recipient_email) == key
            ]
        )

    async def mark_read(
        self,
        notification_ids: Sequence[NotificationId],
        recipient_email: Optional[str] = None,
    ) -> int:
        updated = 0
        for notification_id in set(notification_ids):
            notification = self._store.notifications.get(notification_id)
            if not notification or notification.read:
                continue
            if recipient_email is not None and email_key(
                notification.recipient_email
            ) != email_key(recipient_email):
                continue
            self._store.notifications[notification_id] = notification.model_copy(
                update={"read": True}
            )
            updated += 1
        return updated

    async def delete_by_recipient(self, email: str) -> int:
        doomed = [n.id for n in await self.find_by_recipient(email)]
        for notification_id in doomed:
            del self._store.notifications[notification_id]
        return len(doomed)
