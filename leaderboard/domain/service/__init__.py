"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .leaderboard_service import (
    HistoryEntry,
    HistoryPage,
    LeaderboardService,
    LeaderboardStats,
    RankedUser,
)
from .password_hasher import PasswordHasher
from .points_service import ClaimResult, PointsService
from .user_service import UserService

__all__ = [
    "ClaimResult",
    "HistoryEntry",
    "HistoryPage",
    "JWTService",
    "LeaderboardService",
    "LeaderboardStats",
    "PasswordHasher",
    "PointsService",
    "RankedUser",
    "Service",
    "UserService",
]
