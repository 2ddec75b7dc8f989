"""Skill request entity."""

from datetime import datetime

from pydantic import Field

from peerskill.domain.model.common import DomainModel
from peerskill.domain.value import RequestStatus, SkillRequestId


class SkillRequest(DomainModel):
    """A user asking for help with a skill.

    ``requester_name`` is a snapshot taken when the request is created.
    """

    id: SkillRequestId
    requester_email: str
    requester_name: str
    skill: str
    status: RequestStatus = RequestStatus.OPEN
    created_at: datetime = Field(default_factory=datetime.now)
