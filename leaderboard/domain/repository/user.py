"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from leaderboard.domain.model.user import User
from leaderboard.domain.value import UserId, UserName


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID, active or not.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: UserName) -> Optional[User]:
        """Find a user by display name.

        Args:
            name: The user's display name

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email.

        Args:
            email: Normalised (lower-case) email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_names_by_ids(
        self, user_ids: Sequence[UserId]
    ) -> dict[UserId, UserName]:
        """Resolve display names for many users in one query.

        Args:
            user_ids: IDs to resolve

        Returns:
            Mapping of found IDs to names; unknown IDs are omitted
        """
        pass

    @abstractmethod
    async def find_ranked(self, limit: int) -> list[User]:
        """Find active users ordered for the leaderboard.

        Ordered by total points descending, then earlier ``created_at``,
        then ID, so equal totals rank the same way on every request.

        Args:
            limit: Maximum number of users to return

        Returns:
            Ranked active users
        """
        pass

    @abstractmethod
    async def count_active(self) -> int:
        """Count active users."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def increment_points(self, user_id: UserId, points: int) -> Optional[int]:
        """Atomically add points to a user's total.

        Must accumulate in place at the storage layer so that concurrent
        increments against the same user all apply.

        Args:
            user_id: The user's unique identifier
            points: Points to add

        Returns:
            The new total, or None if no such user exists
        """
        pass
