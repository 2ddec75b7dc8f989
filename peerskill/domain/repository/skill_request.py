"""Skill request repository interface."""

from abc import ABC, abstractmethod
from typing import List

from peerskill.domain.model.skill_request import SkillRequest


class SkillRequestRepository(ABC):
    """Repository for SkillRequest entity."""

    @abstractmethod
    async def save(self, request: SkillRequest) -> SkillRequest:
        """Save a skill request (create)."""
        pass

    @abstractmethod
    async def find_all(self) -> List[SkillRequest]:
        """Find all skill requests, newest first."""
        pass

    @abstractmethod
    async def find_by_requester(self, email: str) -> List[SkillRequest]:
        """Find requests made by an email, newest first."""
        pass

    @abstractmethod
    async def delete_by_requester(self, email: str) -> int:
        """Delete every request made by an email.

        Returns:
            Number of deleted requests
        """
        pass
