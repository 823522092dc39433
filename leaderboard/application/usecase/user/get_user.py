"""Get user use case."""

from datetime import datetime

from pydantic import BaseModel

from leaderboard.application.pagination import parse_user_id
from leaderboard.application.usecase.base import BaseUseCase, ResponseModel
from leaderboard.domain.service import UserService


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: str


class UserInfo(ResponseModel):
    """Public user information."""

    id: str
    name: str
    points: int
    joined_at: datetime


class GetUserResponse(ResponseModel):
    """Get user response."""

    user: UserInfo


class GetUserUseCase(BaseUseCase):
    """Use case for looking up a single user by ID."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> GetUserResponse:
        """Execute get user flow.

        Raises:
            InvalidInputError: If the ID is malformed
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.get_by_id(parse_user_id(request.user_id))

        return GetUserResponse(
            user=UserInfo(
                id=str(user.id),
                name=user.name.root,
                points=user.total_points,
                joined_at=user.created_at,
            )
        )
