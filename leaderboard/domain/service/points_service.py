"""Points domain service."""

import random
from dataclasses import dataclass
from uuid import uuid4

import logfire

from leaderboard.domain.error import InternalError, NotFoundError
from leaderboard.domain.model import (
    MAX_CLAIM_POINTS,
    MIN_CLAIM_POINTS,
    PointClaim,
    User,
)
from leaderboard.domain.repository import PointClaimRepository, UserRepository
from leaderboard.domain.value import Actor, PointClaimId, UserId

from .base import Service


@dataclass
class ClaimResult:
    """Outcome of a successful claim.

    ``target`` reflects the total returned by the atomic increment, not a
    locally recomputed value.
    """

    claim: PointClaim
    target: User
    actor: Actor


class PointsService(Service):
    """Domain service for claiming points."""

    def __init__(
        self,
        user_repository: UserRepository,
        point_claim_repository: PointClaimRepository,
        rng: random.Random,
    ) -> None:
        """Initialize points service.

        Args:
            user_repository: User repository
            point_claim_repository: Claim ledger repository
            rng: Random source used to draw awards
        """
        self.user_repository = user_repository
        self.point_claim_repository = point_claim_repository
        self.rng = rng

    def draw_points(self) -> int:
        """Draw an award uniformly from the allowed range (inclusive)."""
        return self.rng.randint(MIN_CLAIM_POINTS, MAX_CLAIM_POINTS)

    async def claim_points(self, actor: Actor, target_id: UserId) -> ClaimResult:
        """Award random points to a target user on behalf of an actor.

        Appends a ledger entry, then atomically increments the target's
        total in the store.

        Args:
            actor: Authenticated user making the claim
            target_id: User receiving the points (active or not)

        Returns:
            The stored claim and the target with its new total

        Raises:
            NotFoundError: If the target does not exist
            InternalError: If the claim was recorded but the total was not updated
        """
        with logfire.span(
            "points_service.claim_points",
            actor_id=str(actor.id),
            target_id=str(target_id),
        ):
            target = await self.user_repository.find_by_id(target_id)
            if not target:
                logfire.warn("Claim on non-existent user", target_id=str(target_id))
                raise NotFoundError("User", str(target_id))

            points = self.draw_points()
            claim = PointClaim(
                id=PointClaimId(uuid4()),
                user_id=target.id,
                claimed_by=actor.id,
                points=points,
                description=f"Points claimed by {actor.name}",
            )
            saved_claim = await self.point_claim_repository.append(claim)

            new_total = await self.user_repository.increment_points(target.id, points)
            if new_total is None:
                logfire.error(
                    "Claim recorded but points not applied",
                    claim_id=str(saved_claim.id),
                    target_id=str(target.id),
                )
                raise InternalError("Server error while claiming points")

            logfire.info(
                "Points claimed",
                claim_id=str(saved_claim.id),
                target_id=str(target.id),
                points=points,
                total_points=new_total,
            )

            return ClaimResult(
                claim=saved_claim,
                target=target.model_copy(update={"total_points": new_total}),
                actor=actor,
            )
