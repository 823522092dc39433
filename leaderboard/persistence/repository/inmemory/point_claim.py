"""In-memory claim ledger repository for testing."""

from typing import Optional

from leaderboard.domain.model.point_claim import PointClaim
from leaderboard.domain.repository.point_claim import PointClaimRepository
from leaderboard.domain.value import UserId


class InMemoryPointClaimRepository(PointClaimRepository):
    """In-memory implementation of PointClaimRepository for testing."""

    def __init__(self) -> None:
        self._claims: list[PointClaim] = []

    async def append(self, claim: PointClaim) -> PointClaim:
        """Append a claim to the ledger."""
        self._claims.append(claim)
        return claim

    async def find_recent(
        self,
        user_id: Optional[UserId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[PointClaim]:
        """Find claims, most recent first."""
        claims = self._filter(user_id)
        claims.sort(key=lambda c: (c.created_at, c.id), reverse=True)
        return claims[offset : offset + limit]

    async def count(self, user_id: Optional[UserId] = None) -> int:
        """Count claims."""
        return len(self._filter(user_id))

    async def sum_points(self) -> int:
        """Sum of points over the whole ledger."""
        return sum(c.points for c in self._claims)

    def _filter(self, user_id: Optional[UserId]) -> list[PointClaim]:
        if user_id is None:
            return list(self._claims)
        return [c for c in self._claims if c.user_id == user_id]
