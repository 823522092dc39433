"""Argon2 implementation of the password hasher port."""

from argon2 import PasswordHasher as _Argon2Hasher
from argon2.exceptions import InvalidHashError, VerificationError

from leaderboard.domain.service.password_hasher import PasswordHasher


class Argon2PasswordHasher(PasswordHasher):
    """Password hasher backed by argon2-cffi with library defaults."""

    def __init__(self, hasher: _Argon2Hasher | None = None) -> None:
        self._hasher = hasher or _Argon2Hasher()

    def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt."""
        return self._hasher.hash(password)

    def verify(self, password_hash: str, password: str) -> bool:
        """Check a password against a stored Argon2 hash."""
        try:
            return self._hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            return False
