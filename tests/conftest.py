"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire
import pytest
import pytest_asyncio
import sqlalchemy as sa

from leaderboard.config import DatabaseSettings, Settings
from leaderboard.domain.model import PointClaim, User
from leaderboard.domain.value import Actor, PointClaimId, UserId, UserName
from leaderboard.persistence.database import create_engine, create_session_factory
from leaderboard.persistence.tables import metadata

# Keep spans local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_user(
    name: str,
    total_points: int = 0,
    is_active: bool = True,
    created_at: datetime | None = None,
) -> User:
    """Build a user with a derived email and a throwaway hash."""
    created = created_at or BASE_TIME
    return User(
        id=UserId(uuid4()),
        name=UserName(name),
        email=f"{name.lower()}@example.com",
        password_hash="fake$hash",
        total_points=total_points,
        is_active=is_active,
        created_at=created,
        updated_at=created,
    )


def make_claim(
    target: User,
    actor: User,
    points: int = 5,
    created_at: datetime | None = None,
) -> PointClaim:
    """Build a ledger entry from ``actor`` to ``target``."""
    return PointClaim(
        id=PointClaimId(uuid4()),
        user_id=target.id,
        claimed_by=actor.id,
        points=points,
        description=f"Points claimed by {actor.name.root}",
        created_at=created_at or BASE_TIME,
    )


def minutes(n: int) -> datetime:
    """Timestamp ``n`` minutes after the fixed base time."""
    return BASE_TIME + timedelta(minutes=n)


def actor_for(user: User) -> Actor:
    """Actor identity for an existing user."""
    return Actor(id=user.id, name=user.name.root)


@pytest_asyncio.fixture
async def sql_session(tmp_path):
    """Session bound to a fresh SQLite file with the full schema.

    Used by the SQL repository tests; the statements are the ones sent to
    PostgreSQL in production.
    """
    settings = Settings(
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    )
    engine = create_engine(settings)

    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    session_factory = create_session_factory(engine)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def sqlite_database(tmp_path, monkeypatch) -> str:
    """SQLite file with the full schema, wired into ``Settings`` via env.

    The production container picks the URL up from ``DATABASE__URL``. The
    schema is created with a synchronous engine so no event loop is touched.
    """
    db_file = tmp_path / "app.db"
    schema_engine = sa.create_engine(f"sqlite:///{db_file}")
    metadata.create_all(schema_engine)
    schema_engine.dispose()

    url = f"sqlite+aiosqlite:///{db_file}"
    monkeypatch.setenv("DATABASE__URL", url)
    monkeypatch.setenv("ENVIRONMENT", "test")
    return url
