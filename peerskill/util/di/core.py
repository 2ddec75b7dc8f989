"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from peerskill.config import (
    AuthSettings,
    MatchingSettings,
    ReputationSettings,
    SessionSettings,
    Settings,
)
from peerskill.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    Each section is exposed on its own so services depend only on what they use.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_matching_settings(self, settings: Settings) -> MatchingSettings:
        """Provide matching settings."""
        return settings.matching

    @provide(scope=Scope.APP)
    def provide_reputation_settings(self, settings: Settings) -> ReputationSettings:
        """Provide reputation settings."""
        return settings.reputation

    @provide(scope=Scope.APP)
    def provide_session_settings(self, settings: Settings) -> SessionSettings:
        """Provide session settings."""
        return settings.sessions
