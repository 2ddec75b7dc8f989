"""Shared in-memory store for testing.

One store backs all in-memory repositories of a container, so records
written in one request are visible to the next.
"""

from typing import Any
from uuid import UUID

from peerskill.domain.model import Notification, Session, SkillRequest, User


class InMemoryStore:
    """Collections keyed by entity ID, in insertion order."""

    def __init__(self) -> None:
        self.users: dict[UUID, User] = {}
        self.skill_requests: dict[UUID, SkillRequest] = {}
        self.sessions: dict[UUID, Session] = {}
        self.notifications: dict[UUID, Notification] = {}


def newest_first(records: list[Any]) -> list[Any]:
    """Sort by created_at descending; equal timestamps keep newest insertion first."""
    return sorted(reversed(records), key=lambda r: r.created_at, reverse=True)
