"""Unit tests for LeaderboardService."""

from uuid import uuid4

import pytest

from leaderboard.config import LeaderboardSettings
from leaderboard.domain.error import InvalidInputError
from leaderboard.domain.repository import PointClaimRepository, UserRepository
from leaderboard.domain.service import LeaderboardService
from leaderboard.domain.value import UserId
from tests.conftest import make_claim, make_user, minutes
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRankUsers:
    """Tests for rank_users method."""

    @pytest.mark.asyncio
    async def test_ranks_by_points_descending(self, unit_env):
        """Ranks follow total points and start at 1."""
        # Arrange
        service = await unit_env.get(LeaderboardService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("Low", total_points=2))
        await user_repo.save(make_user("High", total_points=30))
        await user_repo.save(make_user("Mid", total_points=11))

        # Act
        ranked = await service.rank_users()

        # Assert
        assert [r.user.name.root for r in ranked] == ["High", "Mid", "Low"]
        assert [r.rank for r in ranked] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_ties_go_to_the_earlier_registration(self, unit_env):
        """Equal totals are ordered by join time."""
        # Arrange
        service = await unit_env.get(LeaderboardService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("Late", total_points=5, created_at=minutes(10)))
        await user_repo.save(make_user("Early", total_points=5, created_at=minutes(1)))

        # Act
        ranked = await service.rank_users()

        # Assert
        assert [r.user.name.root for r in ranked] == ["Early", "Late"]
        assert [r.rank for r in ranked] == [1, 2]

    @pytest.mark.asyncio
    async def test_inactive_users_are_not_ranked(self, unit_env):
        """Deactivated users never appear in the leaderboard."""
        # Arrange
        service = await unit_env.get(LeaderboardService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("Gone", total_points=99, is_active=False))
        await user_repo.save(make_user("Here", total_points=1))

        # Act
        ranked = await service.rank_users()

        # Assert
        assert [r.user.name.root for r in ranked] == ["Here"]
        assert ranked[0].rank == 1

    @pytest.mark.asyncio
    async def test_caps_at_configured_limit(self, unit_env):
        """Only the top 100 users are returned."""
        # Arrange
        service = await unit_env.get(LeaderboardService)
        user_repo = await unit_env.get(UserRepository)
        for i in range(105):
            await user_repo.save(make_user(f"User{i}", total_points=i))

        # Act
        ranked = await service.rank_users()

        # Assert
        assert len(ranked) == 100
        assert ranked[0].user.total_points == 104
        assert ranked[-1].user.total_points == 5
        assert ranked[-1].rank == 100

    @pytest.mark.asyncio
    async def test_limit_comes_from_settings(self, unit_env):
        """A smaller configured cap is honoured."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        service = LeaderboardService(
            user_repository=user_repo,
            point_claim_repository=await unit_env.get(PointClaimRepository),
            settings=LeaderboardSettings(max_ranked_users=2),
        )
        for i in range(4):
            await user_repo.save(make_user(f"User{i}", total_points=i))

        # Act
        ranked = await service.rank_users()

        # Assert
        assert [r.user.total_points for r in ranked] == [3, 2]


class TestGetHistory:
    """Tests for get_history method."""

    async def _seed_five_claims(self, env):
        user_repo = await env.get(UserRepository)
        claim_repo = await env.get(PointClaimRepository)
        alice = await user_repo.save(make_user("Alice"))
        bob = await user_repo.save(make_user("Bob"))
        claims = []
        for i in range(5):
            claims.append(
                await claim_repo.append(
                    make_claim(alice, bob, points=i + 1, created_at=minutes(i))
                )
            )
        return alice, bob, claims

    @pytest.mark.asyncio
    async def test_middle_page_of_five_entries(self, unit_env):
        """limit=2, page=2 over five entries returns the 3rd and 4th newest."""
        # Arrange
        service = await unit_env.get(LeaderboardService)
        _, _, claims = await self._seed_five_claims(unit_env)

        # Act
        page = await service.get_history(page=2, limit=2)

        # Assert
        assert [e.claim.id for e in page.entries] == [claims[2].id, claims[1].id]
        assert page.current == 2
        assert page.total_pages == 3
        assert page.total_count == 5
        assert page.has_next is True
        assert page.has_prev is True

    @pytest.mark.asyncio
    async def test_last_page_has_no_next(self, unit_env):
        """The final partial page reports has_next False."""
        # Arrange
        service = await unit_env.get(LeaderboardService)
        _, _, claims = await self._seed_five_claims(unit_env)

        # Act
        page = await service.get_history(page=3, limit=2)

        # Assert
        assert [e.claim.id for e in page.entries] == [claims[0].id]
        assert page.has_next is False
        assert page.has_prev is True

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, unit_env):
        """Out-of-range pages are empty but keep the totals."""
        # Arrange
        service = await unit_env.get(LeaderboardService)
        await self._seed_five_claims(unit_env)

        # Act
        page = await service.get_history(page=9, limit=2)

        # Assert
        assert page.entries == []
        assert page.total_pages == 3
        assert page.has_next is False

    @pytest.mark.asyncio
    async def test_names_are_resolved(self, unit_env):
        """Entries carry the target and actor display names."""
        # Arrange
        service = await unit_env.get(LeaderboardService)
        await self._seed_five_claims(unit_env)

        # Act
        page = await service.get_history(page=1, limit=1)

        # Assert
        entry = page.entries[0]
        assert entry.target_name == "Alice"
        assert entry.actor_name == "Bob"
        assert entry.claim.points == 5

    @pytest.mark.asyncio
    async def test_unresolvable_names_show_unknown(self, unit_env):
        """A reference to a missing user renders as Unknown."""
        # Arrange
        service = await unit_env.get(LeaderboardService)
        user_repo = await unit_env.get(UserRepository)
        claim_repo = await unit_env.get(PointClaimRepository)
        alice = await user_repo.save(make_user("Alice"))
        ghost = make_user("Ghost")
        await claim_repo.append(make_claim(alice, ghost))

        # Act
        page = await service.get_history(page=1, limit=10)

        # Assert
        assert page.entries[0].target_name == "Alice"
        assert page.entries[0].actor_name == "Unknown"

    @pytest.mark.asyncio
    async def test_scoped_history_only_includes_target(self, unit_env):
        """Scoped history filters on the target user."""
        # Arrange
        service = await unit_env.get(LeaderboardService)
        claim_repo = await unit_env.get(PointClaimRepository)
        alice, bob, _ = await self._seed_five_claims(unit_env)
        await claim_repo.append(make_claim(bob, alice, created_at=minutes(20)))

        # Act
        page = await service.get_history(page=1, limit=20, user_id=bob.id)

        # Assert
        assert page.total_count == 1
        assert page.entries[0].target_name == "Bob"

    @pytest.mark.asyncio
    async def test_scoped_history_of_unknown_user_is_empty(self, unit_env):
        """An unknown user has no history rather than an error."""
        # Arrange
        service = await unit_env.get(LeaderboardService)
        await self._seed_five_claims(unit_env)

        # Act
        page = await service.get_history(page=1, limit=20, user_id=UserId(uuid4()))

        # Assert
        assert page.entries == []
        assert page.total_count == 0
        assert page.total_pages == 0
        assert page.has_next is False
        assert page.has_prev is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (-1, 5)])
    async def test_non_positive_parameters_are_rejected(self, unit_env, page, limit):
        """Page and limit must be at least 1."""
        # Arrange
        service = await unit_env.get(LeaderboardService)

        # Act & Assert
        with pytest.raises(InvalidInputError):
            await service.get_history(page=page, limit=limit)


class TestGetStats:
    """Tests for get_stats method."""

    @pytest.mark.asyncio
    async def test_empty_store(self, unit_env):
        """Nothing registered yields zeros and no top user."""
        # Arrange
        service = await unit_env.get(LeaderboardService)

        # Act
        stats = await service.get_stats()

        # Assert
        assert stats.total_users == 0
        assert stats.total_claims == 0
        assert stats.total_points_awarded == 0
        assert stats.top_user is None

    @pytest.mark.asyncio
    async def test_users_without_claims(self, unit_env):
        """An empty ledger still reports the top-ranked user."""
        # Arrange
        service = await unit_env.get(LeaderboardService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("First", created_at=minutes(0)))
        await user_repo.save(make_user("Second", created_at=minutes(1)))

        # Act
        stats = await service.get_stats()

        # Assert
        assert stats.total_users == 2
        assert stats.total_claims == 0
        assert stats.total_points_awarded == 0
        assert stats.top_user.name.root == "First"

    @pytest.mark.asyncio
    async def test_totals_over_ledger(self, unit_env):
        """Claims and awarded points are summed across all users."""
        # Arrange
        service = await unit_env.get(LeaderboardService)
        user_repo = await unit_env.get(UserRepository)
        claim_repo = await unit_env.get(PointClaimRepository)
        alice = await user_repo.save(make_user("Alice", total_points=7))
        bob = await user_repo.save(make_user("Bob", total_points=2))
        await user_repo.save(make_user("Idle", total_points=50, is_active=False))
        await claim_repo.append(make_claim(alice, bob, points=7))
        await claim_repo.append(make_claim(bob, alice, points=2))

        # Act
        stats = await service.get_stats()

        # Assert
        assert stats.total_users == 2
        assert stats.total_claims == 2
        assert stats.total_points_awarded == 9
        assert stats.top_user.id == alice.id
