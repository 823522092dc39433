"""Point claim (ledger) repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from leaderboard.domain.model.point_claim import PointClaim
from leaderboard.domain.value import UserId


class PointClaimRepository(ABC):
    """Append-only repository for the claim ledger.

    There is deliberately no update or delete operation.
    """

    @abstractmethod
    async def append(self, claim: PointClaim) -> PointClaim:
        """Append a claim to the ledger.

        Args:
            claim: The claim to store

        Returns:
            The stored claim
        """
        pass

    @abstractmethod
    async def find_recent(
        self,
        user_id: Optional[UserId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[PointClaim]:
        """Find claims, most recent first.

        Args:
            user_id: Only claims targeting this user (None for all)
            limit: Maximum number of claims to return
            offset: Number of claims to skip

        Returns:
            Claims ordered by creation time descending
        """
        pass

    @abstractmethod
    async def count(self, user_id: Optional[UserId] = None) -> int:
        """Count claims.

        Args:
            user_id: Only claims targeting this user (None for all)

        Returns:
            Number of matching claims
        """
        pass

    @abstractmethod
    async def sum_points(self) -> int:
        """Sum of points over the whole ledger (0 when empty)."""
        pass
