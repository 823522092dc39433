"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from leaderboard.domain.model import PointClaim, User
from leaderboard.domain.value import PointClaimId, UserId, UserName


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=UserName(row["name"]),
        email=row["email"],
        password_hash=row["password_hash"],
        total_points=row["total_points"],
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_point_claim(row: Dict[str, Any]) -> PointClaim:
    """Convert database row to PointClaim domain model.

    Args:
        row: Database row as dict

    Returns:
        PointClaim domain model
    """
    return PointClaim(
        id=PointClaimId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        claimed_by=UserId(_uuid(row["claimed_by"])),
        points=row["points"],
        description=row["description"],
        created_at=row["created_at"],
    )


def point_claim_to_dict(claim: PointClaim) -> Dict[str, Any]:
    """Convert PointClaim domain model to database dict.

    Args:
        claim: PointClaim domain model

    Returns:
        Dict suitable for database insertion
    """
    return claim.model_dump()
