"""initial_schema

Create the leaderboard schema:
- Users (unique name and email, running points total)
- Point claims (append-only ledger of awards)

Revision ID: 3f2a9c1d7b04
Revises:
Create Date: 2026-10-19 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7b04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column(
            "total_points", sa.Integer(), server_default="0", nullable=False
        ),
        sa.Column(
            "is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="users_name_key"),
        sa.UniqueConstraint("email", name="users_email_key"),
        sa.CheckConstraint(
            "total_points >= 0", name="users_total_points_non_negative"
        ),
    )
    op.create_index(
        "idx_users_ranking",
        "users",
        ["is_active", sa.text("total_points DESC"), "created_at"],
    )

    # ========================================================================
    # POINT_CLAIMS table (append-only)
    # ========================================================================
    op.create_table(
        "point_claims",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("claimed_by", sa.UUID(), nullable=False),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column(
            "description",
            sa.Text(),
            server_default="Points claimed",
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["claimed_by"], ["users.id"]),
        sa.CheckConstraint(
            "points >= 1 AND points <= 10", name="point_claims_points_range"
        ),
    )
    op.create_index(
        "idx_point_claims_user_created",
        "point_claims",
        ["user_id", sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_point_claims_created_at",
        "point_claims",
        [sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_point_claims_created_at", table_name="point_claims")
    op.drop_index("idx_point_claims_user_created", table_name="point_claims")
    op.drop_table("point_claims")
    op.drop_index("idx_users_ranking", table_name="users")
    op.drop_table("users")
