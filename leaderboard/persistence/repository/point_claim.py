"""SQL implementation of the claim ledger repository."""

from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from leaderboard.domain.model import PointClaim
from leaderboard.domain.repository import PointClaimRepository
from leaderboard.domain.value import UserId
from leaderboard.persistence.mappers import point_claim_to_dict, row_to_point_claim
from leaderboard.persistence.tables import point_claims_table


class PostgresPointClaimRepository(PointClaimRepository):
    """PostgreSQL implementation of PointClaimRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def append(self, claim: PointClaim) -> PointClaim:
        """Append a claim to the ledger."""
        stmt = insert(point_claims_table).values(**point_claim_to_dict(claim))
        await self.session.execute(stmt)
        await self.session.flush()
        return claim

    async def find_recent(
        self,
        user_id: Optional[UserId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[PointClaim]:
        """Find claims, most recent first."""
        stmt = select(point_claims_table)
        if user_id is not None:
            stmt = stmt.where(point_claims_table.c.user_id == user_id)

        stmt = (
            stmt.order_by(
                point_claims_table.c.created_at.desc(),
                point_claims_table.c.id.desc(),
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_point_claim(dict(row)) for row in result.mappings().all()]

    async def count(self, user_id: Optional[UserId] = None) -> int:
        """Count claims."""
        stmt = select(func.count()).select_from(point_claims_table)
        if user_id is not None:
            stmt = stmt.where(point_claims_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def sum_points(self) -> int:
        """Sum of points over the whole ledger."""
        stmt = select(func.coalesce(func.sum(point_claims_table.c.points), 0))
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
