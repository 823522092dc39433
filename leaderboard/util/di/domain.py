"""Domain layer DI providers."""

import random

from dishka import Scope, provide

from leaderboard.config import AuthSettings, LeaderboardSettings
from leaderboard.domain.repository import PointClaimRepository, UserRepository
from leaderboard.domain.service import (
    JWTService,
    LeaderboardService,
    PasswordHasher,
    PointsService,
    UserService,
)
from leaderboard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, password_hasher=password_hasher
        )

    @provide
    def get_points_service(
        self,
        user_repository: UserRepository,
        point_claim_repository: PointClaimRepository,
        rng: random.Random,
    ) -> PointsService:
        """Provide points domain service."""
        return PointsService(
            user_repository=user_repository,
            point_claim_repository=point_claim_repository,
            rng=rng,
        )

    @provide
    def get_leaderboard_service(
        self,
        user_repository: UserRepository,
        point_claim_repository: PointClaimRepository,
        settings: LeaderboardSettings,
    ) -> LeaderboardService:
        """Provide leaderboard domain service."""
        return LeaderboardService(
            user_repository=user_repository,
            point_claim_repository=point_claim_repository,
            settings=settings,
        )
