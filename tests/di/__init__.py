"""Mock providers for testing."""

from .clock import MockClockProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockClockProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
