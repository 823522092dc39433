"""Application layer DI providers."""

from dishka import Scope, provide

from leaderboard.application.usecase.points import (
    ClaimPointsUseCase,
    GetStatsUseCase,
    ListHistoryUseCase,
)
from leaderboard.application.usecase.user import (
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
)
from leaderboard.config import PaginationSettings
from leaderboard.domain.service import LeaderboardService, PointsService, UserService
from leaderboard.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(
        self, leaderboard_service: LeaderboardService
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(leaderboard_service=leaderboard_service)

    # Points use cases
    @provide(scope=Scope.REQUEST)
    def get_claim_points_use_case(
        self, points_service: PointsService
    ) -> ClaimPointsUseCase:
        """Provide claim points use case."""
        return ClaimPointsUseCase(points_service=points_service)

    @provide(scope=Scope.REQUEST)
    def get_list_history_use_case(
        self,
        leaderboard_service: LeaderboardService,
        settings: PaginationSettings,
    ) -> ListHistoryUseCase:
        """Provide list history use case."""
        return ListHistoryUseCase(
            leaderboard_service=leaderboard_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_stats_use_case(
        self, leaderboard_service: LeaderboardService
    ) -> GetStatsUseCase:
        """Provide get stats use case."""
        return GetStatsUseCase(leaderboard_service=leaderboard_service)
