"""Integration tests for the request-scoped database session.

Each dishka REQUEST scope owns one session that is committed when the scope
closes cleanly and rolled back when it closes with an exception.
"""

import pytest
import pytest_asyncio
from dishka import make_async_container
from sqlalchemy.ext.asyncio import AsyncEngine

from leaderboard.domain.repository import PointClaimRepository, UserRepository
from leaderboard.util.di.core import ProdConfigProvider
from leaderboard.util.di.infrastructure.persistence import ProdPersistenceProvider
from tests.conftest import make_claim, make_user


@pytest_asyncio.fixture
async def container(sqlite_database):
    """Production config and persistence providers over a SQLite file."""
    container = make_async_container(ProdConfigProvider(), ProdPersistenceProvider())
    yield container
    engine = await container.get(AsyncEngine)
    await container.close()
    await engine.dispose()


class TestRequestSession:
    """Commit and rollback at the end of a request scope."""

    @pytest.mark.asyncio
    async def test_clean_scope_commits(self, container):
        # Arrange
        alice = make_user("Alice")

        # Act
        async with container() as request_container:
            users = await request_container.get(UserRepository)
            await users.save(alice)

        # Assert
        async with container() as request_container:
            users = await request_container.get(UserRepository)
            found = await users.find_by_id(alice.id)

        assert found is not None
        assert found.name == alice.name

    @pytest.mark.asyncio
    async def test_failed_scope_rolls_back(self, container):
        # Arrange
        alice = make_user("Alice")

        # Act
        with pytest.raises(RuntimeError, match="request failed"):
            async with container() as request_container:
                users = await request_container.get(UserRepository)
                await users.save(alice)
                raise RuntimeError("request failed")

        # Assert
        async with container() as request_container:
            users = await request_container.get(UserRepository)
            found = await users.find_by_id(alice.id)

        assert found is None

    @pytest.mark.asyncio
    async def test_ledger_append_and_increment_share_a_transaction(self, container):
        """Both writes of a claim are undone together."""
        # Arrange
        alice = make_user("Alice")
        bob = make_user("Bob")
        async with container() as request_container:
            users = await request_container.get(UserRepository)
            await users.save(alice)
            await users.save(bob)

        # Act
        with pytest.raises(RuntimeError):
            async with container() as request_container:
                users = await request_container.get(UserRepository)
                claims = await request_container.get(PointClaimRepository)
                await claims.append(make_claim(alice, bob, points=7))
                assert await users.increment_points(alice.id, 7) == 7
                raise RuntimeError("request failed")

        # Assert
        async with container() as request_container:
            users = await request_container.get(UserRepository)
            claims = await request_container.get(PointClaimRepository)
            reloaded = await users.find_by_id(alice.id)
            claim_count = await claims.count()

        assert reloaded.total_points == 0
        assert claim_count == 0
