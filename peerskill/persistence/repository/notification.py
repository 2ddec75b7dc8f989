"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from peerskill.domain.model import Notification
from peerskill.domain.repository import NotificationRepository
from peerskill.domain.value import NotificationId, email_key
from peerskill.persistence.mappers import notification_to_dict, row_to_notification
from peerskill.persistence.tables import notifications_table

_recipient_lower = func.lower(notifications_table.c.recipient_email)


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        stmt = notifications_table.insert().values(**notification_to_dict(notification))
        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    async def find_by_recipient(self, email: str) -> List[Notification]:
        stmt = (
            select(notifications_table)
            .where(_recipient_lower == email_key(email))
            .order_by(notifications_table.c.created_at.desc(), notifications_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def mark_read(
        self,
        notification_ids: Sequence[NotificationId],
        recipient_email: Optional[str] = None,
    ) -> int:
        """Flip read on unread notifications among the IDs."""
        stmt = (
            notifications_table.update()
            .where(notifications_table.c.id.in_(list(notification_ids)))
            .where(notifications_table.c.read.is_(False))
            .values(read=True)
        )
        if recipient_email is not None:
            stmt = stmt.where(_recipient_lower == email_key(recipient_email))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_by_recipient(self, email: str) -> int:
        stmt = notifications_table.delete().where(_recipient_lower == email_key(email))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
