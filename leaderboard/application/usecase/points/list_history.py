"""List claim history use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from leaderboard.application.pagination import parse_page_params, parse_user_id
from leaderboard.application.usecase.base import BaseUseCase, ResponseModel
from leaderboard.config import PaginationSettings
from leaderboard.domain.service import LeaderboardService


class ListHistoryRequest(BaseModel):
    """List history request.

    ``page`` and ``limit`` are the raw query values; ``user_id`` scopes the
    history to claims targeting that user.
    """

    page: str | None = None
    limit: str | None = None
    user_id: str | None = None


class HistoryItem(ResponseModel):
    """History entry in response."""

    id: str
    target_name: str
    actor_name: str
    points: int
    description: str
    timestamp: datetime


class PaginationInfo(ResponseModel):
    """Pagination metadata."""

    current: int
    total: int
    has_next: bool
    has_prev: bool


class ListHistoryResponse(ResponseModel):
    """List history response."""

    history: list[HistoryItem]
    pagination: PaginationInfo


class ListHistoryUseCase(BaseUseCase):
    """Use case for paginated claim history, global or per user."""

    def __init__(
        self,
        leaderboard_service: LeaderboardService,
        settings: PaginationSettings,
    ) -> None:
        """Initialize list history use case.

        Args:
            leaderboard_service: Leaderboard domain service
            settings: Pagination defaults and bounds
        """
        self.leaderboard_service = leaderboard_service
        self.settings = settings

    async def execute(self, request: ListHistoryRequest) -> ListHistoryResponse:
        """Execute list history flow.

        Args:
            request: Raw pagination parameters and optional user scope

        Returns:
            One page of history, most recent first

        Raises:
            InvalidInputError: If a parameter cannot be parsed
        """
        scoped = request.user_id is not None
        user_id = parse_user_id(request.user_id) if scoped else None
        default_limit = (
            self.settings.default_user_history_limit
            if scoped
            else self.settings.default_history_limit
        )
        params = parse_page_params(
            request.page,
            request.limit,
            default_limit=default_limit,
            max_limit=self.settings.max_limit,
        )

        with logfire.span(
            "list_history.execute", page=params.page, limit=params.limit, scoped=scoped
        ):
            page = await self.leaderboard_service.get_history(
                page=params.page, limit=params.limit, user_id=user_id
            )

            return ListHistoryResponse(
                history=[
                    HistoryItem(
                        id=str(entry.claim.id),
                        target_name=entry.target_name,
                        actor_name=entry.actor_name,
                        points=entry.claim.points,
                        description=entry.claim.description,
                        timestamp=entry.claim.created_at,
                    )
                    for entry in page.entries
                ],
                pagination=PaginationInfo(
                    current=page.current,
                    total=page.total_pages,
                    has_next=page.has_next,
                    has_prev=page.has_prev,
                ),
            )
