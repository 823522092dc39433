"""In-memory user repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from leaderboard.domain.model.common import utcnow
from leaderboard.domain.model.user import User
from leaderboard.domain.repository.user import UserRepository
from leaderboard.domain.value import UserId, UserName


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_name(self, name: UserName) -> Optional[User]:
        """Find a user by display name."""
        for user in self._users.values():
            if user.name == name:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_names_by_ids(
        self, user_ids: Sequence[UserId]
    ) -> dict[UserId, UserName]:
        """Resolve display names for many users."""
        return {
            user_id: self._users[user_id].name
            for user_id in user_ids
            if user_id in self._users
        }

    async def find_ranked(self, limit: int) -> list[User]:
        """Find active users ordered for the leaderboard."""
        active = [u for u in self._users.values() if u.is_active]
        active.sort(key=lambda u: (-u.total_points, u.created_at, u.id))
        return active[:limit]

    async def count_active(self) -> int:
        """Count active users."""
        return sum(1 for u in self._users.values() if u.is_active)

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            IntegrityError: If another user already has the name or email
        """
        for other in self._users.values():
            if other.id != user.id and (
                other.name == user.name or other.email == user.email
            ):
                raise IntegrityError("Duplicate user", None, Exception())

        self._users[user.id] = user
        return user

    async def increment_points(self, user_id: UserId, points: int) -> Optional[int]:
        """Atomically add points to a user's total.

        Lookup and update run without yielding to the event loop.
        """
        user = self._users.get(user_id)
        if not user:
            return None

        updated_user = user.model_copy(
            update={"total_points": user.total_points + points, "updated_at": utcnow()}
        )
        self._users[user_id] = updated_user
        return updated_user.total_points
