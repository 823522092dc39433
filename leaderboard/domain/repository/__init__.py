"""Repository interfaces for the leaderboard domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from leaderboard.domain.repository.point_claim import PointClaimRepository
from leaderboard.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PointClaimRepository",
]
