"""Strongly typed identifiers for leaderboard entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PointClaimId = NewType("PointClaimId", UUID)
