"""Meeting session entity."""

from datetime import datetime

from pydantic import Field

from peerskill.domain.model.common import DomainModel
from peerskill.domain.value import SessionId


class Session(DomainModel):
    """A tutoring session between two users.

    ``date_time`` is a free-form label, not a parsed timestamp.
    The meeting link is fixed at creation.
    """

    id: SessionId
    scheduler_email: str
    peer_email: str
    skill: str
    date_time: str
    link: str
    created_at: datetime = Field(default_factory=datetime.now)
