"""Get leaderboard stats use case."""

from leaderboard.application.usecase.base import BaseUseCase, ResponseModel
from leaderboard.domain.service import LeaderboardService


class TopUserInfo(ResponseModel):
    """Highest ranked active user."""

    name: str
    points: int


class StatsInfo(ResponseModel):
    """Leaderboard statistics."""

    total_users: int
    total_claims: int
    total_points_awarded: int
    top_user: TopUserInfo | None


class GetStatsResponse(ResponseModel):
    """Get stats response."""

    stats: StatsInfo


class GetStatsUseCase(BaseUseCase):
    """Use case for leaderboard summary statistics."""

    def __init__(self, leaderboard_service: LeaderboardService) -> None:
        self.leaderboard_service = leaderboard_service

    async def execute(self, request: None = None) -> GetStatsResponse:
        """Execute get stats flow."""
        stats = await self.leaderboard_service.get_stats()
        top = stats.top_user

        return GetStatsResponse(
            stats=StatsInfo(
                total_users=stats.total_users,
                total_claims=stats.total_claims,
                total_points_awarded=stats.total_points_awarded,
                top_user=(
                    TopUserInfo(name=top.name.root, points=top.total_points)
                    if top
                    else None
                ),
            )
        )
