"""Infrastructure DI providers."""

from askbase.util.di.infrastructure.clock import ClockProvider, ProdClockProvider
from askbase.util.di.infrastructure.persistence import PersistenceProvider

__all__ = [
    "ClockProvider",
    "ProdClockProvider",
    "PersistenceProvider",
]
