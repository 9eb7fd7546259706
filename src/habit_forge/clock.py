"""Time sources for habit-forge."""

from datetime import datetime, timedelta
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Protocol for anything that can tell the current time."""

    def now(self) -> datetime:
        """Return the current local time."""
        ...


class SystemClock:
    """Clock backed by the system wall clock."""

    def now(self) -> datetime:
        return datetime.now()


class ManualClock:
    """Clock that only moves when told to.

    Used by tests and simulations that need deterministic windows.
    """

    def __init__(self, current: datetime):
        self._current = current

    def now(self) -> datetime:
        return self._current

    def set(self, current: datetime) -> None:
        """Jump to an absolute time."""
        self._current = current

    def advance(self, **kwargs) -> datetime:
        """Move forward by a timedelta given as keyword arguments.

        Example:
            clock.advance(hours=12)
        """
        self._current += timedelta(**kwargs)
        return self._current
