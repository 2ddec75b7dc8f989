"""Reputation use cases."""

from .rate_peer import RatePeerUseCase

__all__ = ["RatePeerUseCase"]
