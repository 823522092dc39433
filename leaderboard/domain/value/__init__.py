"""Domain value objects for the leaderboard."""

from leaderboard.domain.value.identifiers import PointClaimId, UserId
from leaderboard.domain.value.types import Actor, UserName

__all__ = [
    # Identifiers
    "UserId",
    "PointClaimId",
    # Types
    "Actor",
    "UserName",
]
