"""Points use cases."""

from .claim_points import ClaimPointsRequest, ClaimPointsResponse, ClaimPointsUseCase
from .get_stats import GetStatsResponse, GetStatsUseCase
from .list_history import ListHistoryRequest, ListHistoryResponse, ListHistoryUseCase

__all__ = [
    "ClaimPointsRequest",
    "ClaimPointsResponse",
    "ClaimPointsUseCase",
    "GetStatsResponse",
    "GetStatsUseCase",
    "ListHistoryRequest",
    "ListHistoryResponse",
    "ListHistoryUseCase",
]
