"""List users (leaderboard) use case."""

from datetime import datetime

from leaderboard.application.usecase.base import BaseUseCase, ResponseModel
from leaderboard.domain.service import LeaderboardService


class RankedUserItem(ResponseModel):
    """Ranked user in response."""

    id: str
    name: str
    points: int
    rank: int
    joined_at: datetime


class ListUsersResponse(ResponseModel):
    """List users response."""

    users: list[RankedUserItem]


class ListUsersUseCase(BaseUseCase):
    """Use case for the ranked list of active users."""

    def __init__(self, leaderboard_service: LeaderboardService) -> None:
        """Initialize list users use case.

        Args:
            leaderboard_service: Leaderboard domain service
        """
        self.leaderboard_service = leaderboard_service

    async def execute(self, request: None = None) -> ListUsersResponse:
        """Execute list users flow.

        Returns:
            Active users by descending points with 1-based ranks
        """
        ranked = await self.leaderboard_service.rank_users()

        return ListUsersResponse(
            users=[
                RankedUserItem(
                    id=str(entry.user.id),
                    name=entry.user.name.root,
                    points=entry.user.total_points,
                    rank=entry.rank,
                    joined_at=entry.user.created_at,
                )
                for entry in ranked
            ]
        )
