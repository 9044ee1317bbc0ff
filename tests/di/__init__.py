"""Mock providers for testing.

The mock providers are imported before the container builder so they are
registered as implementations of their components.
"""

from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "build_test_container",
]
