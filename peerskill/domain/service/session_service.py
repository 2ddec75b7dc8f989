"""Session scheduling domain service.

Scheduling only records who meets whom about what, with an opaque meeting
link. There is no conflict detection and no calendar logic.
"""

import secrets
import string
import time
from datetime import datetime
from typing import Callable
from uuid import uuid4

import logfire

from peerskill.config import SessionSettings
from peerskill.domain.error import ValidationError
from peerskill.domain.model import Session
from peerskill.domain.repository import SessionRepository
from peerskill.domain.value import SessionId, same_email

from .notification_service import NotificationService
from .user_service import UserService

BASE36_ALPHABET = string.digits + string.ascii_lowercase


def to_base36(value: int) -> str:
    """Encode a non-negative integer in base 36."""
    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def random_token(length: int) -> str:
    """Random base36 token."""
    return "".join(secrets.choice(BASE36_ALPHABET) for _ in range(length))


def generate_meeting_link(
    prefix: str, token_length: int = 6, clock: Callable[[], float] = time.time
) -> str:
    """Build a meeting URL: prefix, two random tokens and a base36 timestamp.

    Example: https://meet.jit.si/PeerSkill-k3x9qa-0pz2mw-lx4b8c1q
    """
    stamp = to_base36(int(clock() * 1000))
    return (
        f"{prefix}{random_token(token_length)}-{random_token(token_length)}-{stamp}"
    )


class SessionService:
    """Domain service for session operations."""

    def __init__(
        self,
        session_repository: SessionRepository,
        user_service: UserService,
        notification_service: NotificationService,
        session_settings: SessionSettings,
    ) -> None:
        """Initialize session service.

        Args:
            session_repository: Session repository
            user_service: User domain service
            notification_service: Notification domain service
            session_settings: Meeting link configuration
        """
        self.session_repository = session_repository
        self.user_service = user_service
        self.notification_service = notification_service
        self.settings = session_settings

    async def create_session(
        self, scheduler_email: str, peer_email: str, skill: str, date_time: str
    ) -> Session:
        """Create a session with a fresh meeting link and notify the peer.

        Args:
            scheduler_email: Email of the user scheduling
            peer_email: Email of the other participant
            skill: Skill label the session is about
            date_time: Human-readable date/time label

        Returns:
            Created session

        Raises:
            ValidationError: If skill or date/time is blank, or peer is the scheduler
            NotFoundError: If scheduler or peer does not exist
        """
        skill = skill.strip()
        date_time = date_time.strip()
        if not skill:
            raise ValidationError("Skill is required")
        if not date_time:
            raise ValidationError("Date and time are required")
        if same_email(scheduler_email, peer_email):
            raise ValidationError("You cannot schedule a session with yourself")

        with logfire.span(
            "session_service.create_session",
            scheduler=scheduler_email,
            peer=peer_email,
            skill=skill,
        ):
            scheduler = await self.user_service.get_by_email(scheduler_email)
            peer = await self.user_service.get_by_email(peer_email)

            session = Session(
                id=SessionId(uuid4()),
                scheduler_email=scheduler.email,
                peer_email=peer.email,
                skill=skill,
                date_time=date_time,
                link=generate_meeting_link(
                    self.settings.meeting_url_prefix, self.settings.token_length
                ),
                created_at=datetime.now(),
            )
            saved = await self.session_repository.save(session)

            await self.notification_service.notify(
                peer.email,
                f"{scheduler.name} scheduled a {skill} session with you on {date_time}.",
            )

            logfire.info("Session created", session_id=str(saved.id))
            return saved

    async def list_for(self, email: str) -> list[Session]:
        """Sessions where the email is scheduler or peer, newest first."""
        return await self.session_repository.find_by_participant(email)

    async def list_all(self) -> list[Session]:
        """Every session, newest first."""
        return await self.session_repository.find_all()
