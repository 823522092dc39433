"""SQL implementation of User repository."""

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from leaderboard.domain.model import User
from leaderboard.domain.model.common import utcnow
from leaderboard.domain.repository import UserRepository
from leaderboard.domain.value import UserId, UserName
from leaderboard.persistence.mappers import row_to_user, user_to_dict
from leaderboard.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_name(self, name: UserName) -> Optional[User]:
        """Find a user by display name."""
        stmt = select(users_table).where(users_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_names_by_ids(
        self, user_ids: Sequence[UserId]
    ) -> dict[UserId, UserName]:
        """Resolve display names for many users in one query."""
        if not user_ids:
            return {}

        stmt = select(users_table.c.id, users_table.c.name).where(
            users_table.c.id.in_(user_ids)
        )
        result = await self.session.execute(stmt)
        return {UserId(row.id): UserName(row.name) for row in result.all()}

    async def find_ranked(self, limit: int) -> list[User]:
        """Find active users ordered for the leaderboard."""
        stmt = (
            select(users_table)
            .where(users_table.c.is_active.is_(True))
            .order_by(
                users_table.c.total_points.desc(),
                users_table.c.created_at.asc(),
                users_table.c.id.asc(),
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def count_active(self) -> int:
        """Count active users."""
        stmt = (
            select(func.count())
            .select_from(users_table)
            .where(users_table.c.is_active.is_(True))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            IntegrityError: If the name or email is already taken
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def increment_points(self, user_id: UserId, points: int) -> Optional[int]:
        """Atomically add points to a user's total.

        The addition happens inside the UPDATE statement, so concurrent
        claims accumulate instead of overwriting each other.
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(
                total_points=users_table.c.total_points + points,
                updated_at=utcnow(),
            )
            .returning(users_table.c.total_points)
        )
        result = await self.session.execute(stmt)
        new_total = result.scalar_one_or_none()
        await self.session.flush()
        return new_total
