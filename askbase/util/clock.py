"""Time sources.

The domain never calls datetime.now() directly. It asks a Clock, so tests
and seed loading can control time.
"""

from datetime import datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Source of the current wall-clock time."""

    def now(self) -> datetime:
        """Return the current time."""
        ...


class SystemClock:
    """Wall clock that never goes backwards within a process."""

    def __init__(self) -> None:
        self._last: datetime | None = None

    def now(self) -> datetime:
        current = datetime.now()
        if self._last is not None and current < self._last:
            return self._last
        self._last = current
        return current


class ManualClock:
    """Clock that only moves when told to.

    Used by tests and deterministic demos.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or datetime(2025, 1, 1, 12, 0, 0)

    def now(self) -> datetime:
        return self._now

    def advance(self, **kwargs: float) -> datetime:
        """Move the clock forward by a timedelta built from kwargs.

        Example:
            clock.advance(minutes=5)
        """
        delta = timedelta(**kwargs)
        if delta < timedelta(0):
            raise ValueError("ManualClock cannot move backwards")
        self._now = self._now + delta
        return self._now

    def set(self, moment: datetime) -> None:
        """Jump to a specific moment (must not be in the past)."""
        if moment < self._now:
            raise ValueError("ManualClock cannot move backwards")
        self._now = moment


def naive_local(moment: datetime) -> datetime:
    """Express a timestamp the way the clocks do: naive local time.

    Timezone-aware values (e.g. ISO strings ending in "Z") are converted
    to the local zone and their tzinfo dropped, so they can be compared
    with clock readings.
    """
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)
