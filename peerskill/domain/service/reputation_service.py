"""Reputation ledger domain service.

Each rating received moves the target's average rating and grants a flat
skill point bonus that does not depend on the rating value:

    new_rating = round((old_rating * reviews + rating) / (reviews + 1), 1)
    reviews += 1
    skill_points += rating_bonus

Writes are optimistic: the new values are stored only if the user's version
is unchanged since they were read, otherwise the update is recomputed.
"""

from collections.abc import Callable
from dataclasses import dataclass

import logfire

from peerskill.config import ReputationSettings
from peerskill.domain.error import NotFoundError, StoreError, ValidationError
from peerskill.domain.model import User
from peerskill.domain.repository import UserRepository
from peerskill.domain.value import same_email

from .notification_service import NotificationService

# rating, reviews, skill points
ReputationValues = tuple[float | None, int, int]


@dataclass
class RatingOutcome:
    """Reputation after a rating was applied."""

    email: str
    new_rating: float
    new_points: int
    reviews: int


def running_average(old_rating: float | None, reviews: int, rating: float) -> float:
    """Fold one rating into an average over ``reviews`` ratings.

    An unset average counts as zero; it is only unset when reviews is 0.
    """
    total = (old_rating or 0.0) * reviews + rating
    return round(total / (reviews + 1), 1)


class ReputationService:
    """Domain service for ratings and skill points."""

    def __init__(
        self,
        user_repository: UserRepository,
        notification_service: NotificationService,
        reputation_settings: ReputationSettings,
    ) -> None:
        """Initialize reputation service.

        Args:
            user_repository: User repository
            notification_service: Notification domain service
            reputation_settings: Bonus, rating bounds and retry budget
        """
        self.user_repository = user_repository
        self.notification_service = notification_service
        self.settings = reputation_settings

    async def apply_rating(
        self, rater_email: str, target_email: str, rating: float
    ) -> RatingOutcome:
        """Apply a rating from one user to another.

        Args:
            rater_email: Email of the caller giving the rating
            target_email: Email of the rated user
            rating: Rating value, 1 to 5 inclusive

        Returns:
            The target's new rating, points and review count

        Raises:
            ValidationError: If rating is out of range or target is the rater
            NotFoundError: If target does not exist
            StoreError: If concurrent writers exhausted the retry budget
        """
        if not self.settings.min_rating <= rating <= self.settings.max_rating:
            raise ValidationError(
                f"Rating must be between {self.settings.min_rating:g} "
                f"and {self.settings.max_rating:g}"
            )
        if same_email(rater_email, target_email):
            raise ValidationError("You cannot rate yourself")

        with logfire.span(
            "reputation_service.apply_rating",
            rater=rater_email,
            target=target_email,
            rating=rating,
        ):
            bonus = self.settings.rating_bonus

            def compute(user: User) -> tuple[float, int, int]:
                return (
                    running_average(user.rating, user.reviews, rating),
                    user.reviews + 1,
                    user.skill_points + bonus,
                )

            user, (new_rating, reviews, points) = await self._update(
                target_email, compute
            )

            await self.notification_service.notify(
                user.email,
                f"You received a {rating:g}-star rating and earned {bonus} skill points.",
            )

            logfire.info(
                "Rating applied",
                target=user.email,
                new_rating=new_rating,
                new_points=points,
                reviews=reviews,
            )
            return RatingOutcome(
                email=user.email,
                new_rating=new_rating,
                new_points=points,
                reviews=reviews,
            )

    async def set_points(self, email: str, points: int) -> RatingOutcome:
        """Overwrite a user's skill point balance.

        Args:
            email: Email of the user
            points: New balance, zero or more

        Returns:
            The user's reputation after the change

        Raises:
            ValidationError: If points is negative
            NotFoundError: If user does not exist
        """
        if points < 0:
            raise ValidationError("Points must be zero or more")

        with logfire.span("reputation_service.set_points", email=email, points=points):
            user, (rating, reviews, new_points) = await self._update(
                email, lambda u: (u.rating, u.reviews, points)
            )
            logfire.info("Points set", email=user.email, points=new_points)
            return RatingOutcome(
                email=user.email,
                new_rating=rating or 0.0,
                new_points=new_points,
                reviews=reviews,
            )

    async def _update(
        self, email: str, compute: Callable[[User], ReputationValues]
    ) -> tuple[User, ReputationValues]:
        """Read-compute-write loop keyed on the user's version.

        Returns:
            The user as read before the successful write, and the written values
        """
        for attempt in range(1, self.settings.max_attempts + 1):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("Reputation update for unknown user", email=email)
                raise NotFoundError("User", email)

            values = compute(user)
            written = await self.user_repository.update_reputation(
                user.id, user.version, *values
            )
            if written:
                return user, values

            logfire.warn(
                "Concurrent reputation update, retrying",
                email=email,
                attempt=attempt,
            )

        logfire.error(
            "Reputation update gave up", email=email, attempts=self.settings.max_attempts
        )
        raise StoreError("Could not update reputation, please retry")
