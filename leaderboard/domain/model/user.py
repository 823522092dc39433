"""User aggregate root.

Users register with a unique name and email and accumulate points
through claims made on their behalf.
"""

from datetime import datetime

from pydantic import Field

from leaderboard.domain.model.common import DomainModel, utcnow
from leaderboard.domain.value import UserId, UserName


class User(DomainModel):
    """User aggregate root.

    ``total_points`` only ever changes through a point claim. Users are
    deactivated rather than deleted.
    """

    id: UserId
    name: UserName
    email: str
    password_hash: str
    total_points: int = Field(default=0, ge=0)
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
