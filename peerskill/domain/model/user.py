"""User aggregate root.

Users list the skills they can teach and want to learn, and accumulate
skill points and a running average rating from their peers.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from peerskill.domain.model.common import DomainModel
from peerskill.domain.value import UserId


class User(DomainModel):
    """User aggregate root.

    ``rating`` stays unset until the first review arrives. ``version`` is
    bumped on every reputation write and guards concurrent rating updates.
    """

    id: UserId
    name: str
    email: str
    contact: Optional[str] = None
    password_hash: str
    teach: list[str] = Field(default_factory=list)
    learn: list[str] = Field(default_factory=list)
    study_year: Optional[str] = None
    branch: Optional[str] = None
    avatar: Optional[str] = None
    skill_points: int = Field(default=0, ge=0)
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    reviews: int = Field(default=0, ge=0)
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
