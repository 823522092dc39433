"""Domain value objects for the leaderboard.

Value objects are immutable and defined by their values, not identity.
"""

from pydantic import field_validator

from leaderboard.domain.value.common import RootValueObject, ValueObject
from leaderboard.domain.value.identifiers import UserId

MAX_NAME_LENGTH = 50


class UserName(RootValueObject[str]):
    """Unique display name of a user.

    Surrounding whitespace is stripped; the result must be 1-50 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name length."""
        v = v.strip()
        if len(v) < 1 or len(v) > MAX_NAME_LENGTH:
            raise ValueError(f"Name must be 1-{MAX_NAME_LENGTH} characters")
        return v


class Actor(ValueObject):
    """Authenticated identity performing an operation.

    Supplied by the auth collaborator; the core never verifies credentials.
    """

    id: UserId
    name: str
