"""Strongly typed identifiers for PeerSkill domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
SkillRequestId = NewType("SkillRequestId", UUID)
SessionId = NewType("SessionId", UUID)
NotificationId = NewType("NotificationId", UUID)
