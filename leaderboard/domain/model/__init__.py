"""Domain model entities for the leaderboard."""

from leaderboard.domain.model.point_claim import (
    DEFAULT_CLAIM_DESCRIPTION,
    MAX_CLAIM_POINTS,
    MIN_CLAIM_POINTS,
    PointClaim,
)
from leaderboard.domain.model.user import User

__all__ = [
    "User",
    "PointClaim",
    "DEFAULT_CLAIM_DESCRIPTION",
    "MAX_CLAIM_POINTS",
    "MIN_CLAIM_POINTS",
]
