"""SQL repository implementations."""

from leaderboard.persistence.repository.point_claim import PostgresPointClaimRepository
from leaderboard.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPointClaimRepository",
]
