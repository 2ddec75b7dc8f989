"""Notification use cases."""

from .list_notifications import ListNotificationsUseCase
from .mark_read import MarkReadUseCase

__all__ = ["ListNotificationsUseCase", "MarkReadUseCase"]
