"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from leaderboard.config import Settings
from leaderboard.domain.repository import PointClaimRepository, UserRepository
from leaderboard.persistence.database import create_engine, create_session_factory
from leaderboard.persistence.repository import (
    PostgresPointClaimRepository,
    PostgresUserRepository,
)
from leaderboard.util.di.base import ProviderBase
from leaderboard.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised. A claim's ledger append
        and total increment therefore land in the same transaction.

        dishka sends the exception that closed the scope into the generator
        rather than raising it at the ``yield``; it keeps propagating on its
        own once the finalizer returns.
        """
        async with session_factory() as session:
            exc = yield session
            if exc is None:
                await session.commit()
                logfire.info("Session committed")
            else:
                logfire.warn("Session rollback", error=str(exc))
                await session.rollback()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_point_claim_repository(
        self, session: AsyncSession
    ) -> PointClaimRepository:
        """Provide PointClaim repository."""
        return PostgresPointClaimRepository(session)
