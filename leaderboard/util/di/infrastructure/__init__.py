"""Infrastructure providers."""

# Import bases
from .hashing import HashingProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .hashing import ProdHashingProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "HashingProvider",
    "PersistenceProvider",
    "ProdHashingProvider",
    "ProdPersistenceProvider",
]
