"""In-memory repository implementations for testing."""

from .point_claim import InMemoryPointClaimRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryPointClaimRepository",
    "InMemoryUserRepository",
]
