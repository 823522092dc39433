"""Point claim entity.

A claim is one entry of the append-only ledger: it awards a random number
of points to a target user and records who made the claim.
"""

from datetime import datetime

from pydantic import Field

from leaderboard.domain.model.common import DomainModel, utcnow
from leaderboard.domain.value import PointClaimId, UserId

MIN_CLAIM_POINTS = 1
MAX_CLAIM_POINTS = 10
DEFAULT_CLAIM_DESCRIPTION = "Points claimed"


class PointClaim(DomainModel):
    """Immutable ledger entry.

    Business rules:
    - points are always within [1, 10]
    - never updated or deleted once stored
    """

    id: PointClaimId
    user_id: UserId  # Target receiving the points
    claimed_by: UserId  # Actor who made the claim
    points: int = Field(ge=MIN_CLAIM_POINTS, le=MAX_CLAIM_POINTS)
    description: str = DEFAULT_CLAIM_DESCRIPTION
    created_at: datetime = Field(default_factory=utcnow)
