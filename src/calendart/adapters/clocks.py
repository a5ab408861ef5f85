"""Clocks for CALENDART."""

from datetime import datetime, timedelta, timezone

from calendart.domain.utils import utc_now
from calendart.interfaces.clock import Clock


class SystemClock(Clock):
    """Clock reading the system time, in UTC."""

    def now(self) -> datetime:
        return utc_now()


class FixedClock(Clock):
    """A clock that only moves when told to.

    Note:
        Not suitable for production use; primarily for testing and replays.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self._now = (
            start if start is not None else datetime(2000, 1, 1, tzinfo=timezone.utc)
        )

    def now(self) -> datetime:
        return self._now

    def set(self, moment: datetime) -> None:
        """Jump to `moment`."""
        self._now = moment

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock forward by `delta` and return the new time."""
        self._now += delta
        return self._now
