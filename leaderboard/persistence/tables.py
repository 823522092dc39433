"""SQLAlchemy table definitions for the leaderboard.

These match the schema created by the Alembic migrations. Column types are
the generic SQLAlchemy ones so the same tables serve PostgreSQL in
production and SQLite in repository tests.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    Uuid,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("name", String(50), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", Text, nullable=False),
    Column("total_points", Integer, nullable=False, server_default="0"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    CheckConstraint("total_points >= 0", name="users_total_points_non_negative"),
)

Index(
    "idx_users_ranking",
    users_table.c.is_active,
    users_table.c.total_points.desc(),
    users_table.c.created_at,
)

# ============================================================================
# POINT_CLAIMS TABLE (append-only ledger)
# ============================================================================
point_claims_table = Table(
    "point_claims",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("user_id", Uuid, ForeignKey("users.id"), nullable=False),  # Target
    Column("claimed_by", Uuid, ForeignKey("users.id"), nullable=False),  # Actor
    Column("points", Integer, nullable=False),
    Column("description", Text, nullable=False, server_default="Points claimed"),
    Column("created_at", DateTime(timezone=True), nullable=False),
    CheckConstraint("points >= 1 AND points <= 10", name="point_claims_points_range"),
)

Index(
    "idx_point_claims_user_created",
    point_claims_table.c.user_id,
    point_claims_table.c.created_at.desc(),
)
Index("idx_point_claims_created_at", point_claims_table.c.created_at.desc())
