"""Explicit parsing of pagination query parameters.

Query parameters arrive as raw strings. Missing values fall back to the
defaults; anything present that is not a positive integer within bounds is
rejected instead of being coerced.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from leaderboard.domain.error import InvalidInputError
from leaderboard.domain.value import UserId

DEFAULT_PAGE = 1

# Largest offset a SQL OFFSET clause accepts (signed 64-bit)
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PageParams:
    """Validated pagination parameters."""

    page: int
    limit: int


def _parse_positive_int(name: str, raw: Optional[str], default: int) -> int:
    if raw is None or raw.strip() == "":
        return default

    value = raw.strip()
    # int() would also accept "+3", "1_0" and surrounding whitespace
    if not (value.isascii() and value.isdigit()):
        raise InvalidInputError(f"{name} must be a positive integer")

    parsed = int(value)
    if parsed < 1:
        raise InvalidInputError(f"{name} must be a positive integer")
    return parsed


def parse_page_params(
    page: Optional[str],
    limit: Optional[str],
    default_limit: int,
    max_limit: int,
) -> PageParams:
    """Parse and validate page and limit.

    Args:
        page: Raw 1-indexed page number (None for default 1)
        limit: Raw page size (None for ``default_limit``)
        default_limit: Page size used when ``limit`` is absent
        max_limit: Largest accepted page size

    Returns:
        Validated parameters

    Raises:
        InvalidInputError: If a value is non-numeric or below 1, if limit
            exceeds max_limit, or if the page starts past MAX_OFFSET
    """
    parsed_page = _parse_positive_int("page", page, DEFAULT_PAGE)
    parsed_limit = _parse_positive_int("limit", limit, default_limit)
    if parsed_limit > max_limit:
        raise InvalidInputError(f"limit must not exceed {max_limit}")
    if (parsed_page - 1) * parsed_limit > MAX_OFFSET:
        raise InvalidInputError("page is out of range")
    return PageParams(page=parsed_page, limit=parsed_limit)


def parse_user_id(raw: Optional[str]) -> UserId:
    """Parse a user ID supplied by a caller.

    Raises:
        InvalidInputError: If the ID is missing or not a UUID
    """
    if raw is None or not str(raw).strip():
        raise InvalidInputError("User ID is required")
    try:
        return UserId(UUID(str(raw).strip()))
    except ValueError:
        raise InvalidInputError("Invalid user ID")
