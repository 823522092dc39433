"""Points routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header
from pydantic import BaseModel, ConfigDict, Field

from leaderboard.application.usecase.points import (
    ClaimPointsRequest,
    ClaimPointsResponse,
    ClaimPointsUseCase,
    GetStatsResponse,
    GetStatsUseCase,
    ListHistoryRequest,
    ListHistoryResponse,
    ListHistoryUseCase,
)
from leaderboard.domain.service import JWTService
from leaderboard.interface.api.auth import extract_token

router = APIRouter(prefix="/points", tags=["points"], route_class=DishkaRoute)


class ClaimPointsAPIRequest(BaseModel):
    """API request for claiming points."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId")


@router.post("/claim", response_model=ClaimPointsResponse)
async def claim_points(
    request: ClaimPointsAPIRequest,
    claim_points_use_case: FromDishka[ClaimPointsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ClaimPointsResponse:
    """Award 1-10 random points to a user.

    Requires authentication via ``Authorization: Bearer`` or the
    ``auth_token`` cookie.

    Args:
        request: Target user ID
        claim_points_use_case: Claim points use case from DI
        jwt_service: JWT service from DI
        authorization: Authorization header (optional)
        auth_token: JWT token from cookie (optional)

    Returns:
        The created claim and the target's new total

    Example:
        POST /points/claim
        {"userId": "0b6c..."}
    """
    actor = jwt_service.get_actor_from_token(extract_token(authorization, auth_token))
    return await claim_points_use_case.execute(
        ClaimPointsRequest(actor=actor, target_user_id=request.user_id)
    )


@router.get("/history", response_model=ListHistoryResponse)
async def list_history(
    list_history_use_case: FromDishka[ListHistoryUseCase],
    page: str | None = None,
    limit: str | None = None,
) -> ListHistoryResponse:
    """Get claim history across all users, most recent first.

    ``page`` and ``limit`` are validated by the use case.
    """
    return await list_history_use_case.execute(
        ListHistoryRequest(page=page, limit=limit)
    )


@router.get("/history/{user_id}", response_model=ListHistoryResponse)
async def list_user_history(
    user_id: str,
    list_history_use_case: FromDishka[ListHistoryUseCase],
    page: str | None = None,
    limit: str | None = None,
) -> ListHistoryResponse:
    """Get claim history for claims targeting one user."""
    return await list_history_use_case.execute(
        ListHistoryRequest(page=page, limit=limit, user_id=user_id)
    )


@router.get("/stats", response_model=GetStatsResponse)
async def get_stats(
    get_stats_use_case: FromDishka[GetStatsUseCase],
) -> GetStatsResponse:
    """Get leaderboard statistics."""
    return await get_stats_use_case.execute()
