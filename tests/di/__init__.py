"""Mock providers for testing."""

from .clock import MockClockProvider
from .container import build_test_container

__all__ = [
    "MockClockProvider",
    "build_test_container",
]
