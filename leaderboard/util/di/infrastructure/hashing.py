"""Password hashing infrastructure providers."""

from dishka import Scope, provide

from leaderboard.adapter.argon2 import Argon2PasswordHasher
from leaderboard.domain.service import PasswordHasher
from leaderboard.util.di.base import ProviderBase


class HashingProvider(ProviderBase):
    """Hashing component base."""

    __mock_component__ = "hashing"


class ProdHashingProvider(HashingProvider):
    """Production hashing provider using Argon2."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        """Provide password hasher."""
        return Argon2PasswordHasher()
