"""Core DI providers (non-mockable)."""

import random

from dishka import Scope, provide

from leaderboard.config import (
    AuthSettings,
    LeaderboardSettings,
    PaginationSettings,
    Settings,
)
from leaderboard.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
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
    def provide_leaderboard_settings(self, settings: Settings) -> LeaderboardSettings:
        """Provide ranking settings."""
        return settings.leaderboard

    @provide(scope=Scope.APP)
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        """Provide pagination settings."""
        return settings.pagination

    @provide(scope=Scope.APP)
    def provide_random(self) -> random.Random:
        """Provide the random source used to draw point awards."""
        return random.SystemRandom()
