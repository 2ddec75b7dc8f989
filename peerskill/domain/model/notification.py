"""Notification entity."""

from datetime import datetime

from pydantic import Field

from peerskill.domain.model.common import DomainModel
from peerskill.domain.value import NotificationId


class Notification(DomainModel):
    """Message delivered to a user. ``read`` only ever flips to True."""

    id: NotificationId
    recipient_email: str
    message: str
    read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
