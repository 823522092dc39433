"""Leaderboard domain service.

Derives the ranking, the claim history and summary statistics from the
user store and the claim ledger. Nothing here mutates state.
"""

import math
from dataclasses import dataclass
from typing import Optional

import logfire

from leaderboard.config import LeaderboardSettings
from leaderboard.domain.error import InvalidInputError
from leaderboard.domain.model import PointClaim, User
from leaderboard.domain.repository import PointClaimRepository, UserRepository
from leaderboard.domain.value import UserId

from .base import Service

UNKNOWN_USER_NAME = "Unknown"


@dataclass
class RankedUser:
    """Active user with its 1-based leaderboard position."""

    user: User
    rank: int


@dataclass
class HistoryEntry:
    """Ledger entry with target and actor names resolved."""

    claim: PointClaim
    target_name: str
    actor_name: str


@dataclass
class HistoryPage:
    """One page of claim history plus pagination metadata."""

    entries: list[HistoryEntry]
    current: int
    total_pages: int
    total_count: int
    has_next: bool
    has_prev: bool


@dataclass
class LeaderboardStats:
    """Summary over the whole store and ledger."""

    total_users: int
    total_claims: int
    total_points_awarded: int
    top_user: Optional[User]


class LeaderboardService(Service):
    """Domain service for ranking and history views."""

    def __init__(
        self,
        user_repository: UserRepository,
        point_claim_repository: PointClaimRepository,
        settings: LeaderboardSettings,
    ) -> None:
        """Initialize leaderboard service.

        Args:
            user_repository: User repository
            point_claim_repository: Claim ledger repository
            settings: Ranking configuration
        """
        self.user_repository = user_repository
        self.point_claim_repository = point_claim_repository
        self.settings = settings

    async def rank_users(self) -> list[RankedUser]:
        """Rank active users by total points.

        Returns:
            At most ``max_ranked_users`` users, rank strictly increasing from 1
        """
        with logfire.span("leaderboard_service.rank_users"):
            users = await self.user_repository.find_ranked(
                limit=self.settings.max_ranked_users
            )
            logfire.info("Users ranked", count=len(users))
            return [
                RankedUser(user=user, rank=index + 1)
                for index, user in enumerate(users)
            ]

    async def get_history(
        self,
        page: int,
        limit: int,
        user_id: Optional[UserId] = None,
    ) -> HistoryPage:
        """Get a page of claim history, most recent first.

        Args:
            page: 1-indexed page number
            limit: Page size
            user_id: Only claims targeting this user (None for all)

        Returns:
            The requested page with pagination metadata

        Raises:
            InvalidInputError: If page or limit is below 1
        """
        if page < 1:
            raise InvalidInputError("page must be a positive integer")
        if limit < 1:
            raise InvalidInputError("limit must be a positive integer")

        with logfire.span(
            "leaderboard_service.get_history",
            page=page,
            limit=limit,
            user_id=str(user_id) if user_id else None,
        ):
            skip = (page - 1) * limit

            total_count = await self.point_claim_repository.count(user_id=user_id)
            claims = await self.point_claim_repository.find_recent(
                user_id=user_id, limit=limit, offset=skip
            )

            # Resolve every referenced name in a single batch (avoid N+1)
            referenced = {c.user_id for c in claims} | {c.claimed_by for c in claims}
            names = await self.user_repository.find_names_by_ids(list(referenced))

            entries = [
                HistoryEntry(
                    claim=claim,
                    target_name=self._name_of(names, claim.user_id),
                    actor_name=self._name_of(names, claim.claimed_by),
                )
                for claim in claims
            ]

            logfire.info("History listed", count=len(entries), total=total_count)

            return HistoryPage(
                entries=entries,
                current=page,
                total_pages=math.ceil(total_count / limit),
                total_count=total_count,
                has_next=skip + len(entries) < total_count,
                has_prev=page > 1,
            )

    async def get_stats(self) -> LeaderboardStats:
        """Summarise users and the ledger.

        Returns:
            Active user count, claim count, total points awarded and the
            top-ranked active user (None if there are no active users)
        """
        with logfire.span("leaderboard_service.get_stats"):
            total_users = await self.user_repository.count_active()
            total_claims = await self.point_claim_repository.count()
            total_points = await self.point_claim_repository.sum_points()
            top = await self.user_repository.find_ranked(limit=1)

            return LeaderboardStats(
                total_users=total_users,
                total_claims=total_claims,
                total_points_awarded=total_points,
                top_user=top[0] if top else None,
            )

    @staticmethod
    def _name_of(names: dict, user_id: UserId) -> str:
        name = names.get(user_id)
        return name.root if name is not None else UNKNOWN_USER_NAME
