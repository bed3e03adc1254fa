"""Clock infrastructure providers."""

from dishka import Scope, provide

from askbase.util.clock import Clock, SystemClock
from askbase.util.di.base import ProviderBase


class ClockProvider(ProviderBase):
    """Clock component base."""

    __mock_component__ = "clock"


class ProdClockProvider(ClockProvider):
    """Production clock provider using the system wall clock."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clock(self) -> Clock:
        """Provide the system clock."""
        return SystemClock()
