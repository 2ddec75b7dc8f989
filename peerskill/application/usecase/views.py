"""Read models returned by several use cases.

None of them carry password hashes.
"""

from datetime import datetime

from peerskill.application.usecase.base import ApiModel
from peerskill.domain.model import Notification, Session, SkillRequest, User


class PeerSummary(ApiModel):
    """What one user sees of another."""

    name: str
    email: str
    contact: str | None
    teach: list[str]
    learn: list[str]
    study_year: str | None
    branch: str | None
    avatar: str | None
    skill_points: int
    rating: float | None
    reviews: int

    @classmethod
    def from_user(cls, user: User) -> "PeerSummary":
        return cls(
            name=user.name,
            email=user.email,
            contact=user.contact,
            teach=user.teach,
            learn=user.learn,
            study_year=user.study_year,
            branch=user.branch,
            avatar=user.avatar,
            skill_points=user.skill_points,
            rating=user.rating,
            reviews=user.reviews,
        )


class UserProfile(PeerSummary):
    """Full user record minus the password hash."""

    user_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            user_id=str(user.id),
            created_at=user.created_at,
            updated_at=user.updated_at,
            **PeerSummary.from_user(user).model_dump(),
        )


class SkillRequestView(ApiModel):
    """Skill request as listed to admins."""

    request_id: str
    email: str
    name: str
    skill: str
    status: str
    created_at: datetime

    @classmethod
    def from_request(cls, request: SkillRequest) -> "SkillRequestView":
        return cls(
            request_id=str(request.id),
            email=request.requester_email,
            name=request.requester_name,
            skill=request.skill,
            status=request.status.value,
            created_at=request.created_at,
        )


class SessionView(ApiModel):
    """Scheduled session."""

    session_id: str
    scheduler: str
    peer: str
    skill: str
    date_time: str
    link: str
    created_at: datetime

    @classmethod
    def from_session(cls, session: Session) -> "SessionView":
        return cls(
            session_id=str(session.id),
            scheduler=session.scheduler_email,
            peer=session.peer_email,
            skill=session.skill,
            date_time=session.date_time,
            link=session.link,
            created_at=session.created_at,
        )


class NotificationView(ApiModel):
    """Notification as shown to its recipient."""

    id: str
    email: str
    message: str
    read: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationView":
        return cls(
            id=str(notification.id),
            email=notification.recipient_email,
            message=notification.message,
            read=notification.read,
            created_at=notification.created_at,
        )
