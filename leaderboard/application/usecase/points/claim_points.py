"""Claim points use case."""

from datetime import datetime

from pydantic import BaseModel

from leaderboard.application.pagination import parse_user_id
from leaderboard.application.usecase.base import BaseUseCase, ResponseModel
from leaderboard.domain.error import UnauthenticatedError
from leaderboard.domain.service import PointsService
from leaderboard.domain.value import Actor


class ClaimPointsRequest(BaseModel):
    """Claim points request."""

    actor: Actor | None  # Resolved by the auth collaborator
    target_user_id: str | None


class ClaimInfo(ResponseModel):
    """Created claim."""

    claim_id: str
    points: int
    target_name: str
    actor_name: str
    timestamp: datetime


class ClaimedUserInfo(ResponseModel):
    """Target user after the claim."""

    id: str
    name: str
    points: int


class ClaimPointsResponse(ResponseModel):
    """Claim points response."""

    message: str
    claim: ClaimInfo
    user: ClaimedUserInfo


class ClaimPointsUseCase(BaseUseCase):
    """Use case for claiming random points for a user."""

    def __init__(self, points_service: PointsService) -> None:
        """Initialize claim points use case.

        Args:
            points_service: Points domain service
        """
        self.points_service = points_service

    async def execute(self, request: ClaimPointsRequest) -> ClaimPointsResponse:
        """Execute claim flow.

        Args:
            request: Actor and raw target user ID

        Returns:
            The created claim and the target's new total

        Raises:
            UnauthenticatedError: If no actor was resolved
            InvalidInputError: If the target ID is missing or malformed
            NotFoundError: If the target does not exist
        """
        if request.actor is None:
            raise UnauthenticatedError("Authentication required to claim points")

        target_id = parse_user_id(request.target_user_id)
        result = await self.points_service.claim_points(request.actor, target_id)

        return ClaimPointsResponse(
            message="Points claimed successfully",
            claim=ClaimInfo(
                claim_id=str(result.claim.id),
                points=result.claim.points,
                target_name=result.target.name.root,
                actor_name=result.actor.name,
                timestamp=result.claim.created_at,
            ),
            user=ClaimedUserInfo(
                id=str(result.target.id),
                name=result.target.name.root,
                points=result.target.total_points,
            ),
        )
