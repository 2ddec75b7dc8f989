"""Domain value objects for PeerSkill.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from typing import Iterable

from peerskill.domain.value.common import ValueObject


class Role(str, Enum):
    """Caller role carried in bearer tokens."""

    USER = "user"
    ADMIN = "admin"


class RequestStatus(str, Enum):
    """Status of a skill request.

    Requests are created Open and never transitioned.
    """

    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    CLOSED = "Closed"


class MatchMode(str, Enum):
    """Skill matching policy."""

    SUBSTRING = "substring"
    EXACT = "exact"


class Principal(ValueObject):
    """Authenticated caller."""

    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def email_key(email: str) -> str:
    """Comparison key for emails.

    Emails are stored as typed at signup and compared case-insensitively.
    """
    return email.strip().lower()


def same_email(a: str, b: str) -> bool:
    return email_key(a) == email_key(b)


def normalize_skills(labels: Iterable[str]) -> list[str]:
    """Strip labels, drop blanks and case-insensitive duplicates.

    Keeps the first spelling of each label, in input order.
    """
    seen: set[str] = set()
    result: list[str] = []
    for label in labels:
        cleaned = label.strip()
        key = cleaned.casefold()
        if not cleaned or key in seen:
            continue
        seen.add(key)
        result.append(cleaned)
    return result
