"""Mock providers for testing."""

from .hashing import FakePasswordHasher, MockHashingProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "FakePasswordHasher",
    "MockHashingProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
